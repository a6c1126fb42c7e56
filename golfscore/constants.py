"""Constants for the golfscore scoring core."""

# Lies with a column in the long-game baseline table
LONG_GAME_LIES = ('tee', 'fairway', 'rough', 'sand')

# Putting surface; end lie that switches the lookup to the putting table
GREEN = 'green'

# End lie recorded for a shot that went out of bounds
OB = 'OB'

# Drill types accepted by the strokes gained calculator
PUTTING = 'putting'
LONG_GAME = 'longGame'
DRILL_TYPES = (PUTTING, LONG_GAME)

# Shot types as recorded by the hole tracker
SHOT_TYPES = ('tee', 'approach', 'putt')

# Baselines are tabulated in feet (putting) and yards (long game);
# the app records distances in meters.
METERS_TO_FEET = 3.28084
METERS_TO_YARDS = 1.09361

DISTANCE_UNITS = ('meters', 'native')

# Stroke-and-distance penalty for an out-of-bounds shot
OB_PENALTY_STROKES = 1

# Match play hole results, from side A's perspective
HOLE_WON = 1
HOLE_HALVED = 0
HOLE_LOST = -1
HOLE_RESULTS = (HOLE_LOST, HOLE_HALVED, HOLE_WON)

ALL_SQUARE = 'All Square'

# Copenhagen hands out six points per hole
COPENHAGEN_POINTS_PER_HOLE = 6

# Level names accepted by the log_level setting
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# Umbriago: a sweep pays this many points per net stroke under par
UMBRIAGO_SWEEP_POINTS = 8
UMBRIAGO_MULTIPLIERS = (1, 2, 4)
UMBRIAGO_PAYOUT_MODES = ('difference', 'total')
TEAM_A = 'A'
TEAM_B = 'B'

# Wolf
WOLF_POSITIONS = ('first', 'last')
WOLF_SIDE = 'wolf'
OPPONENTS_SIDE = 'opponents'
TIED_SIDE = 'tie'

# Packaged reference data
PUTTING_BASELINE_FILE = 'putt_baseline.csv'
LONG_GAME_BASELINE_FILE = 'shot_baseline.csv'
CONFIG_FILE = 'scoring_config.json'
