"""
Kuji Constants - TigerStyle

All limits are explicit, named with units, big-endian naming convention.
Category comes first, specifics last: GENERATOR_ARITY_MAX not MAX_ARITY.
"""

# =============================================================================
# Seed / PCG Constants
# =============================================================================

SEED_STATE_MASK: int = (1 << 64) - 1  # 64-bit LCG state
SEED_OUTPUT_MASK: int = (1 << 32) - 1  # 32-bit output word
SEED_OUTPUT_BITS_COUNT: int = 32
SEED_MULTIPLIER: int = 6364136223846793005  # PCG default multiplier
SEED_INCREMENT_DEFAULT: int = 1442695040888963407  # PCG default stream
SEED_FLOAT_BITS_COUNT: int = 53  # IEEE double mantissa

# =============================================================================
# Generator Limits
# =============================================================================

GENERATOR_ARITY_MIN: int = 1  # map_n / flat_map_n
GENERATOR_ARITY_MAX: int = 6
ZIP_ARITY_MIN: int = 2  # zip_n starts at pairs

# =============================================================================
# Sampling Defaults
# =============================================================================

QUICK_GENERATE_SEED_VALUE: int = 1  # Fixed seed for quick_generate
SAMPLES_COUNT_DEFAULT: int = 100  # Samples per GenConfig.samples call
SEED_VALUE_MAX: int = 2**63 - 1  # Upper bound for randomly chosen seeds

# =============================================================================
# Character Ranges
# =============================================================================

CHAR_CODE_POINT_MAX: int = 0x10FFFF
CHAR_ASCII_MIN: int = 32  # space
CHAR_ASCII_MAX: int = 126  # tilde
