"""The phase 0 beacon state."""

from __future__ import annotations

from dataclasses import dataclass

from myth.alias import Bytes32, Gwei, Root, Slot
from myth.constants import (
    EPOCHS_PER_ETH1_VOTING_PERIOD,
    EPOCHS_PER_HISTORICAL_VECTOR,
    EPOCHS_PER_SLASHINGS_VECTOR,
    HISTORICAL_ROOTS_LIMIT,
    JUSTIFICATION_BITS_LENGTH,
    MAX_ATTESTATIONS,
    SLOTS_PER_EPOCH,
    SLOTS_PER_HISTORICAL_ROOT,
    VALIDATOR_REGISTRY_LIMIT,
)
from myth.containers import (
    BeaconBlockHeader,
    Checkpoint,
    Eth1Data,
    Fork,
    PendingAttestation,
    Validator,
    _as_instance,
    _bits,
    _bytes,
    _child,
    _Container,
    _list,
    _root,
    _uint,
    _uint64,
    _vector,
)
from myth.ssz import BitVector, FixedVector, LimitedList

_ZERO_ROOT = Bytes32.zero()
_EPOCH_ATTESTATIONS_LIMIT = MAX_ATTESTATIONS * SLOTS_PER_EPOCH


@dataclass
class BeaconState(_Container):
    """Everything a beacon node tracks between blocks."""

    genesis_time: int = _uint()
    genesis_validators_root: Root = _bytes(Bytes32)
    slot: Slot = _uint()
    fork: Fork = _child(Fork)
    latest_block_header: BeaconBlockHeader = _child(BeaconBlockHeader)
    block_roots: FixedVector[Root] = _vector(SLOTS_PER_HISTORICAL_ROOT, _root, _ZERO_ROOT)
    state_roots: FixedVector[Root] = _vector(SLOTS_PER_HISTORICAL_ROOT, _root, _ZERO_ROOT)
    historical_roots: LimitedList[Root] = _list(HISTORICAL_ROOTS_LIMIT, _root)
    eth1_data: Eth1Data = _child(Eth1Data)
    eth1_data_votes: LimitedList[Eth1Data] = _list(
        EPOCHS_PER_ETH1_VOTING_PERIOD * SLOTS_PER_EPOCH, _as_instance(Eth1Data)
    )
    eth1_deposit_index: int = _uint()
    validators: LimitedList[Validator] = _list(VALIDATOR_REGISTRY_LIMIT, _as_instance(Validator))
    balances: LimitedList[Gwei] = _list(VALIDATOR_REGISTRY_LIMIT, _uint64)
    randao_mixes: FixedVector[Bytes32] = _vector(EPOCHS_PER_HISTORICAL_VECTOR, _root, _ZERO_ROOT)
    slashings: FixedVector[Gwei] = _vector(EPOCHS_PER_SLASHINGS_VECTOR, _uint64, 0)
    previous_epoch_attestations: LimitedList[PendingAttestation] = _list(
        _EPOCH_ATTESTATIONS_LIMIT, _as_instance(PendingAttestation)
    )
    current_epoch_attestations: LimitedList[PendingAttestation] = _list(
        _EPOCH_ATTESTATIONS_LIMIT, _as_instance(PendingAttestation)
    )
    justification_bits: BitVector = _bits(BitVector, JUSTIFICATION_BITS_LENGTH)
    previous_justified_checkpoint: Checkpoint = _child(Checkpoint)
    current_justified_checkpoint: Checkpoint = _child(Checkpoint)
    finalized_checkpoint: Checkpoint = _child(Checkpoint)