# Attribute weighting
KEY_WEIGHT = 2
PREFERRED_WEIGHT = 1
ATTRIBUTE_MAX = 20      # Normalization ceiling of the in-game scale
MIN_RECOMMENDED = 12    # Below this an attribute is reported as missing

# Coverage ladder (evaluated top-down, first match wins)
COVERAGE_EXCELLENT_MIN = 80   # requires a backup
COVERAGE_GOOD_MIN = 70        # requires a backup
COVERAGE_ADEQUATE_MIN = 60
COVERAGE_POOR_MIN = 40
BACKUP_MIN_SCORE = 60         # Second-best player needed for excellent/good

# Display
TOP_PLAYERS_DISPLAYED = 5

# Recruitment target presentation (independent of MIN_RECOMMENDED)
PRIORITY_TARGET_VALUE = 14
PREFERRED_TARGET_VALUE = 12
PRIORITY_TARGET_COUNT = 3
PREFERRED_TARGET_COUNT = 2

# Batch analysis
ANALYSIS_MAX_WORKERS = 1      # >1 scores tactic slots on a thread pool
WEAK_DEPTH_THRESHOLD = 60     # Position average below this is a squad gap
