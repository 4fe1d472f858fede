"""Phase 0 beacon chain constants, configuration and preset values."""

from myth.alias import Bytes4, DomainType, Epoch, Gwei, Slot, Version

# Domain types
DOMAIN_BEACON_PROPOSER: DomainType = Bytes4(b"\x00\x00\x00\x00")
DOMAIN_BEACON_ATTESTER: DomainType = Bytes4(b"\x01\x00\x00\x00")
DOMAIN_RANDAO: DomainType = Bytes4(b"\x02\x00\x00\x00")
DOMAIN_DEPOSIT: DomainType = Bytes4(b"\x03\x00\x00\x00")
DOMAIN_VOLUNTARY_EXIT: DomainType = Bytes4(b"\x04\x00\x00\x00")
DOMAIN_SELECTION_PROOF: DomainType = Bytes4(b"\x05\x00\x00\x00")
DOMAIN_AGGREGATE_AND_PROOF: DomainType = Bytes4(b"\x06\x00\x00\x00")
DOMAIN_APPLICATION_MASK: DomainType = Bytes4(b"\x00\x00\x00\x01")

# Misc
UINT64_MAX: int = 2**64 - 1
UINT64_MAX_SQRT: int = 4_294_967_295
GENESIS_SLOT: Slot = 0
GENESIS_EPOCH: Epoch = 0
FAR_FUTURE_EPOCH: Epoch = UINT64_MAX
BASE_REWARDS_PER_EPOCH: int = 4
DEPOSIT_CONTRACT_TREE_DEPTH: int = 32
JUSTIFICATION_BITS_LENGTH: int = 4
ENDIANNESS: str = "little"

# Withdrawal prefixes
BLS_WITHDRAWAL_PREFIX: int = 0x00
ETH1_ADDRESS_WITHDRAWAL_PREFIX: int = 0x01

# Config: genesis
MIN_GENESIS_ACTIVE_VALIDATOR_COUNT: int = 1 << 14
MIN_GENESIS_TIME: int = 1606824000  # Dec 1, 2020, 12pm UTC
GENESIS_FORK_VERSION: Version = Bytes4(b"\x00\x00\x00\x00")
GENESIS_DELAY: int = 604_800  # 7 days in seconds

# Config: time
SECONDS_PER_SLOT: Slot = 12
SECONDS_PER_ETH1_BLOCK: int = 14
MIN_VALIDATOR_WITHDRAWABILITY_DELAY: Epoch = 1 << 8
SHARD_COMMITTEE_PERIOD: Epoch = 1 << 8
ETH1_FOLLOW_DISTANCE: int = 1 << 11

# Config: validator cycle
EJECTION_BALANCE: Gwei = 16_000_000_000
MIN_PER_EPOCH_CHURN_LIMIT: int = 1 << 2
CHURN_LIMIT_QUOTIENT: int = 1 << 16

# Preset: gwei
MIN_DEPOSIT_AMOUNT: Gwei = 1_000_000_000
MAX_EFFECTIVE_BALANCE: Gwei = 32_000_000_000
EFFECTIVE_BALANCE_INCREMENT: Gwei = 1_000_000_000

# Preset: misc
MAX_COMMITTEES_PER_SLOT: int = 1 << 6
TARGET_COMMITTEE_SIZE: int = 1 << 7
MAX_VALIDATORS_PER_COMMITTEE: int = 1 << 11
SHUFFLE_ROUND_COUNT: int = 90
HYSTERESIS_QUOTIENT: int = 4
HYSTERESIS_DOWNWARD_MULTIPLIER: int = 1
HYSTERESIS_UPWARD_MULTIPLIER: int = 5

# Preset: time
MIN_ATTESTATION_INCLUSION_DELAY: Slot = 1
SLOTS_PER_EPOCH: Slot = 1 << 5
MIN_SEED_LOOKAHEAD: Epoch = 1
MAX_SEED_LOOKAHEAD: Epoch = 1 << 2
MIN_EPOCHS_TO_INACTIVITY_PENALTY: Epoch = 1 << 2
EPOCHS_PER_ETH1_VOTING_PERIOD: Epoch = 1 << 6
SLOTS_PER_HISTORICAL_ROOT: Slot = 1 << 13

# Preset: state list lengths
EPOCHS_PER_HISTORICAL_VECTOR: Epoch = 1 << 16
EPOCHS_PER_SLASHINGS_VECTOR: Epoch = 1 << 13
HISTORICAL_ROOTS_LIMIT: int = 1 << 24
VALIDATOR_REGISTRY_LIMIT: int = 1 << 40

# Preset: rewards and penalties
BASE_REWARD_FACTOR: int = 1 << 6
WHISTLEBLOWER_REWARD_QUOTIENT: int = 1 << 9
PROPOSER_REWARD_QUOTIENT: int = 1 << 3
INACTIVITY_PENALTY_QUOTIENT: int = 1 << 26
MIN_SLASHING_PENALTY_QUOTIENT: int = 1 << 7
PROPORTIONAL_SLASHING_MULTIPLIER: int = 1

# Preset: max operations per block
MAX_PROPOSER_SLASHINGS: int = 1 << 4
MAX_ATTESTER_SLASHINGS: int = 1 << 1
MAX_ATTESTATIONS: int = 1 << 7
MAX_DEPOSITS: int = 1 << 4
MAX_VOLUNTARY_EXITS: int = 1 << 4