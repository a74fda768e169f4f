# ============================================================================
# MATCHING
# ============================================================================
MIN_MATCH_LENGTH = 3  # shortest horizontal/vertical run that counts as a match


# ============================================================================
# BOARD DEFAULTS
# ============================================================================
GRID_ROWS = 8
GRID_COLS = 8

# Cap on resolution passes per move. None runs every cascade to exhaustion.
MAX_CASCADES = None

# Piece palette used by RandomGenerator when none is supplied.
DEFAULT_PIECES = (
    'red',
    'green',
    'blue',
    'yellow',
    'magenta',
    'cyan',
    'orange',
)
