# myth

Python data types for the Ethereum beacon chain, phase 0. The package has no
dependencies outside the standard library.

## Modules

- `myth.alias`: fixed-size byte strings and the custom type aliases.
  `FixedBytes` is a `bytes` subclass. Its sized subclasses are `Bytes4`, `Bytes32`,
  `Bytes48` and `Bytes96`. Building one with the wrong number of bytes raises
  `ValueError`. `FixedBytes.zero()` returns the all-zero value. `FixedBytes.from_hex(text)`
  parses hex, with or without a leading `0x`. The module also defines the aliases
  `Slot`, `Epoch`, `CommitteeIndex`, `ValidatorIndex` and `Gwei`, which are `int`.
  `Root`, `Hash32` and `Domain` are `Bytes32`. `Version`, `DomainType` and
  `ForkDigest` are `Bytes4`. `BLSPubkey` is `Bytes48` and `BLSSignature` is `Bytes96`.
- `myth.constants`: the phase 0 values. These are the domain types (`DOMAIN_RANDAO`
  and the others), the misc values (`FAR_FUTURE_EPOCH`, `DEPOSIT_CONTRACT_TREE_DEPTH`
  and more) and the withdrawal prefixes. They also include the config values for
  genesis, time and the validator lifecycle, and the preset values for gwei amounts,
  committees, time, state list lengths, rewards and per-block operation limits.
- `myth.ssz`: the SSZ collection types.
  - `LimitedList(limit, items=())` holds at most `limit` items. `append` raises
    `ValueError` when the list is full.
  - `FixedVector(length, items)` holds exactly `length` items.
  - `BitList(limit, bits=())` is a bounded list of bits. It has `to_bytes()` and
    `BitList.from_bytes(limit, data)`; the encoding carries a trailing delimiter bit.
  - `BitVector(length, bits=None)` holds exactly `length` bits and starts out all
    `False`. It has `to_bytes()` and `BitVector.from_bytes(length, data)`.
- `myth.containers`: the phase 0 containers as dataclasses:
  - the small ones: `Fork`, `ForkData`, `Checkpoint`, `Validator`, `AttestationData`,
    `IndexedAttestation`, `PendingAttestation`, `Eth1Data`, `HistoricalBatch`,
    `DepositMessage`, `DepositData`, `BeaconBlockHeader` and `SigningData`;
  - the operations: `ProposerSlashing`, `AttesterSlashing`, `Attestation`, `Deposit`
    and `VoluntaryExit`;
  - the blocks and signed envelopes: `SignedVoluntaryExit`, `SignedBeaconBlockHeader`,
    `BeaconBlockBody`, `BeaconBlock` and `SignedBeaconBlock`.
- `myth.state`: `BeaconState`.

Every container field has a default: zero, zero bytes, an empty list, a zero-filled
vector or an empty container. Each field is checked when the container is built:

- Integers must lie in the unsigned 64-bit range.
- Plain `bytes` are converted to the field's fixed-size type.
- Lists are checked against their limits and vectors against their lengths.
- Nested containers must have the right type.

A failure raises `TypeError` or `ValueError`, and the message names the container and
the field.

## Installation

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
```

## Usage

```python
from myth.alias import Bytes32
from myth.constants import DOMAIN_RANDAO, SLOTS_PER_EPOCH
from myth.containers import Checkpoint
from myth.ssz import BitList

root = Bytes32.from_hex("0x" + "11" * 32)
checkpoint = Checkpoint(epoch=3, root=root)

bits = BitList(limit=8)
bits.append(True)
bits.append(False)
encoded = bits.to_bytes()
assert BitList.from_bytes(8, encoded) == bits

print(SLOTS_PER_EPOCH, DOMAIN_RANDAO.hex())
```

## Command line

```
myth
```

This command prints `Hello, world!` and exits with status 0. It takes no options
other than `--help`.

## What it does not do

The package only describes the data. Only `BitList` and `BitVector` serialize.
It does not do the following:

- serialize containers, lists or vectors to SSZ;
- compute hash tree roots;
- create or verify BLS signatures;
- run state transitions or fork choice;
- talk to the network or store data.

## Tests

```
pytest
```