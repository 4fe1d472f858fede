import pytest

from myth import constants
from myth.alias import Bytes4
from myth.containers import Validator
from myth.ssz import BitList, BitVector


@pytest.mark.parametrize(
    "text, name",
    [
        ("0x00000000", "DOMAIN_BEACON_PROPOSER"),
        ("0x01000000", "DOMAIN_BEACON_ATTESTER"),
        ("0x02000000", "DOMAIN_RANDAO"),
        ("0x03000000", "DOMAIN_DEPOSIT"),
        ("0x04000000", "DOMAIN_VOLUNTARY_EXIT"),
        ("0x05000000", "DOMAIN_SELECTION_PROOF"),
        ("0x06000000", "DOMAIN_AGGREGATE_AND_PROOF"),
        ("0x00000001", "DOMAIN_APPLICATION_MASK"),
    ],
)
def test_domain_types_parse_from_hex(text, name):
    assert Bytes4.from_hex(text) == getattr(constants, name)


def test_genesis_fork_version_is_zero_version():
    assert constants.GENESIS_FORK_VERSION == Bytes4.zero()


def test_far_future_epoch_fits_uint64():
    assert constants.FAR_FUTURE_EPOCH == constants.UINT64_MAX
    assert constants.FAR_FUTURE_EPOCH.bit_length() == 64
    assert constants.UINT64_MAX_SQRT**2 <= constants.UINT64_MAX
    assert (constants.UINT64_MAX_SQRT + 1) ** 2 > constants.UINT64_MAX


def test_justification_bits_encode_into_one_byte():
    bits = BitVector(constants.JUSTIFICATION_BITS_LENGTH)
    assert bits.to_bytes() == b"\x00"
    assert len(bits) == constants.JUSTIFICATION_BITS_LENGTH


def test_full_committee_bitlist_round_trips():
    bits = BitList(
        constants.MAX_VALIDATORS_PER_COMMITTEE,
        [True] * constants.MAX_VALIDATORS_PER_COMMITTEE,
    )
    encoded = bits.to_bytes()
    assert len(encoded) == constants.MAX_VALIDATORS_PER_COMMITTEE // 8 + 1
    decoded = BitList.from_bytes(constants.MAX_VALIDATORS_PER_COMMITTEE, encoded)
    assert decoded == bits


def test_committee_bitlist_rejects_one_extra_bit():
    with pytest.raises(ValueError):
        BitList(
            constants.MAX_VALIDATORS_PER_COMMITTEE,
            [False] * (constants.MAX_VALIDATORS_PER_COMMITTEE + 1),
        )


def test_balance_ordering():
    validator = Validator(effective_balance=constants.MAX_EFFECTIVE_BALANCE)
    assert validator.effective_balance == 32_000_000_000
    assert constants.MIN_DEPOSIT_AMOUNT <= constants.EJECTION_BALANCE
    assert constants.EJECTION_BALANCE < validator.effective_balance
    assert validator.effective_balance % constants.EFFECTIVE_BALANCE_INCREMENT == 0


def test_endianness_matches_byte_order_name():
    attester = Bytes4.from_hex("0x01000000")
    assert attester == constants.DOMAIN_BEACON_ATTESTER
    assert int.from_bytes(bytes(attester), constants.ENDIANNESS) == 1