"""
Configuration constants.

Centralizes the defaults used by the tile generators.
"""

# =============================================================================
# GENERAL
# =============================================================================

DEFAULT_SEED = 0

# =============================================================================
# RANDOM STREAMS
# =============================================================================

# Each generator draws from its own stream derived from the grid seed.
BLOB_RNG_DOMAIN = "wang.blob"
MAZE_RNG_DOMAIN = "wang.maze"

# =============================================================================
# BLOB FILL
# =============================================================================

# When True, a cell with no legal catalog tile aborts generation instead of
# being left unresolved.
DEFAULT_STRICT_BLOB_FILL = False

# =============================================================================
# MAZE / ROOMS
# =============================================================================

# Percent chance (0-100) of extending from a random active cell rather than
# the most recently added one. 0 gives a pure recursive backtracker.
DEFAULT_MAZE_RANDOMNESS_PERCENT = 10

# Close near-complete 2x2 loops into rooms.
DEFAULT_GENERATE_ROOMS = False
