"""Phase 0 beacon chain containers: misc dependencies, operations, blocks and envelopes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import field, fields, dataclass
from functools import partial
from typing import Any

from myth.alias import (
    BLSPubkey,
    BLSSignature,
    Bytes4,
    Bytes32,
    Bytes48,
    Bytes96,
    CommitteeIndex,
    Domain,
    Epoch,
    FixedBytes,
    Gwei,
    Hash32,
    Root,
    Slot,
    ValidatorIndex,
    Version,
)
from myth.constants import (
    DEPOSIT_CONTRACT_TREE_DEPTH,
    MAX_ATTESTATIONS,
    MAX_ATTESTER_SLASHINGS,
    MAX_DEPOSITS,
    MAX_PROPOSER_SLASHINGS,
    MAX_VALIDATORS_PER_COMMITTEE,
    MAX_VOLUNTARY_EXITS,
    SLOTS_PER_HISTORICAL_ROOT,
    UINT64_MAX,
)
from myth.ssz import BitList, BitVector, FixedVector, LimitedList

_Convert = Callable[[Any], Any]


def _uint64(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an unsigned 64-bit integer, got {type(value).__name__}")
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"{value} is outside the unsigned 64-bit range")
    return value


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a bool, got {type(value).__name__}")
    return value


def _as_bytes(cls: type[FixedBytes]) -> _Convert:
    return lambda value: value if type(value) is cls else cls(value)


def _as_instance(cls: type) -> _Convert:
    def convert(value: Any) -> Any:
        if not isinstance(value, cls):
            raise TypeError(f"expected {cls.__name__}, got {type(value).__name__}")
        return value

    return convert


def _field(check: _Convert, default_factory: Callable[[], Any]) -> Any:
    return field(default_factory=default_factory, metadata={"check": check})


def _uint() -> Any:
    return field(default=0, metadata={"check": _uint64})


def _bytes(cls: type[FixedBytes]) -> Any:
    return _field(_as_bytes(cls), cls.zero)


def _child(cls: type) -> Any:
    return _field(_as_instance(cls), cls)


def _list(limit: int, item: _Convert) -> Any:
    return _field(lambda items: LimitedList(limit, map(item, items)), partial(LimitedList, limit))


def _vector(length: int, item: _Convert, zero: Any) -> Any:
    return _field(
        lambda items: FixedVector(length, map(item, items)),
        lambda: FixedVector(length, [zero] * length),
    )


def _bits(cls: type, size: int) -> Any:
    return _field(partial(cls, size), partial(cls, size))


_root = _as_bytes(Bytes32)


class _Container:
    """Converts and checks every field after construction, naming the field on failure."""

    def __post_init__(self) -> None:
        for f in fields(self):
            try:
                setattr(self, f.name, f.metadata["check"](getattr(self, f.name)))
            except (TypeError, ValueError) as exc:
                raise type(exc)(f"{type(self).__name__}.{f.name}: {exc}") from exc


@dataclass
class Fork(_Container):
    previous_version: Version = _bytes(Bytes4)
    current_version: Version = _bytes(Bytes4)
    epoch: Epoch = _uint()


@dataclass
class ForkData(_Container):
    current_version: Version = _bytes(Bytes4)
    genesis_validators_root: Root = _bytes(Bytes32)


@dataclass
class Checkpoint(_Container):
    epoch: Epoch = _uint()
    root: Root = _bytes(Bytes32)


@dataclass
class Validator(_Container):
    pubkey: BLSPubkey = _bytes(Bytes48)
    withdrawal_credentials: Bytes32 = _bytes(Bytes32)
    effective_balance: Gwei = _uint()
    slashed: bool = field(default=False, metadata={"check": _boolean})
    activation_eligibility_epoch: Epoch = _uint()
    activation_epoch: Epoch = _uint()
    exit_epoch: Epoch = _uint()
    withdrawable_epoch: Epoch = _uint()


@dataclass
class AttestationData(_Container):
    slot: Slot = _uint()
    index: CommitteeIndex = _uint()
    beacon_block_root: Root = _bytes(Bytes32)
    source: Checkpoint = _child(Checkpoint)
    target: Checkpoint = _child(Checkpoint)


@dataclass
class IndexedAttestation(_Container):
    attesting_indices: LimitedList[ValidatorIndex] = _list(MAX_VALIDATORS_PER_COMMITTEE, _uint64)
    data: AttestationData = _child(AttestationData)
    signature: BLSSignature = _bytes(Bytes96)


@dataclass
class PendingAttestation(_Container):
    aggregation_bits: BitList = _bits(BitList, MAX_VALIDATORS_PER_COMMITTEE)
    data: AttestationData = _child(AttestationData)
    inclusion_delay: Slot = _uint()
    proposer_index: ValidatorIndex = _uint()


@dataclass
class Eth1Data(_Container):
    deposit_root: Root = _bytes(Bytes32)
    deposit_count: int = _uint()
    block_hash: Hash32 = _bytes(Bytes32)


@dataclass
class HistoricalBatch(_Container):
    block_roots: FixedVector[Root] = _vector(SLOTS_PER_HISTORICAL_ROOT, _root, Bytes32.zero())
    state_roots: FixedVector[Root] = _vector(SLOTS_PER_HISTORICAL_ROOT, _root, Bytes32.zero())


@dataclass
class DepositMessage(_Container):
    pubkey: BLSPubkey = _bytes(Bytes48)
    withdrawal_credentials: Bytes32 = _bytes(Bytes32)
    amount: Gwei = _uint()


@dataclass
class DepositData(_Container):
    pubkey: BLSPubkey = _bytes(Bytes48)
    withdrawal_credentials: Bytes32 = _bytes(Bytes32)
    amount: Gwei = _uint()
    signature: BLSSignature = _bytes(Bytes96)


@dataclass
class BeaconBlockHeader(_Container):
    slot: Slot = _uint()
    proposer_index: ValidatorIndex = _uint()
    parent_root: Root = _bytes(Bytes32)
    state_root: Root = _bytes(Bytes32)
    body_root: Root = _bytes(Bytes32)


@dataclass
class SigningData(_Container):
    object_root: Root = _bytes(Bytes32)
    domain: Domain = _bytes(Bytes32)


@dataclass
class SignedBeaconBlockHeader(_Container):
    message: BeaconBlockHeader = _child(BeaconBlockHeader)
    signature: BLSSignature = _bytes(Bytes96)


@dataclass
class ProposerSlashing(_Container):
    signed_header_1: SignedBeaconBlockHeader = _child(SignedBeaconBlockHeader)
    signed_header_2: SignedBeaconBlockHeader = _child(SignedBeaconBlockHeader)


@dataclass
class AttesterSlashing(_Container):
    attestation_1: IndexedAttestation = _child(IndexedAttestation)
    attestation_2: IndexedAttestation = _child(IndexedAttestation)


@dataclass
class Attestation(_Container):
    aggregation_bits: BitList = _bits(BitList, MAX_VALIDATORS_PER_COMMITTEE)
    data: AttestationData = _child(AttestationData)
    signature: BLSSignature = _bytes(Bytes96)


@dataclass
class Deposit(_Container):
    proof: FixedVector[Bytes32] = _vector(DEPOSIT_CONTRACT_TREE_DEPTH + 1, _root, Bytes32.zero())
    data: DepositData = _child(DepositData)


@dataclass
class VoluntaryExit(_Container):
    epoch: Epoch = _uint()
    validator_index: ValidatorIndex = _uint()


@dataclass
class SignedVoluntaryExit(_Container):
    message: VoluntaryExit = _child(VoluntaryExit)
    signature: BLSSignature = _bytes(Bytes96)


@dataclass
class BeaconBlockBody(_Container):
    randao_reveal: BLSSignature = _bytes(Bytes96)
    eth1_data: Eth1Data = _child(Eth1Data)
    graffiti: Bytes32 = _bytes(Bytes32)
    proposer_slashings: LimitedList[ProposerSlashing] = _list(
        MAX_PROPOSER_SLASHINGS, _as_instance(ProposerSlashing)
    )
    attester_slashings: LimitedList[AttesterSlashing] = _list(
        MAX_ATTESTER_SLASHINGS, _as_instance(AttesterSlashing)
    )
    attestations: LimitedList[Attestation] = _list(MAX_ATTESTATIONS, _as_instance(Attestation))
    deposits: LimitedList[Deposit] = _list(MAX_DEPOSITS, _as_instance(Deposit))
    voluntary_exits: LimitedList[SignedVoluntaryExit] = _list(
        MAX_VOLUNTARY_EXITS, _as_instance(SignedVoluntaryExit)
    )


@dataclass
class BeaconBlock(_Container):
    slot: Slot = _uint()
    proposer_index: ValidatorIndex = _uint()
    parent_root: Root = _bytes(Bytes32)
    state_root: Root = _bytes(Bytes32)
    body: BeaconBlockBody = _child(BeaconBlockBody)


@dataclass
class SignedBeaconBlock(_Container):
    message: BeaconBlock = _child(BeaconBlock)
    signature: BLSSignature = _bytes(Bytes96)


__all__ = ["BitVector"]  # re-exported for the state module's field helpers