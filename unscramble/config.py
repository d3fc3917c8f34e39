"""Central configuration for game rules and file locations.

All default rules, retry bounds, and paths are defined here.
"""

# =============================================================================
# Game Rules
# =============================================================================
MAX_NO_OF_WORDS = 10
SCORE_INCREASE = 20

# =============================================================================
# Retry Bounds
# =============================================================================
MAX_PICK_ATTEMPTS = 1000
MAX_SHUFFLE_ATTEMPTS = 100

# =============================================================================
# Directories
# =============================================================================
WORD_PACKS_DIR = "word_packs"
DEFAULT_PACK = "classic"
LOGS_DIR = "logs"
