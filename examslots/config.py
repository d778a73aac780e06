# -----------------------------
# CONFIGURATION
# -----------------------------
DEFAULT_ALGO = 'propagate'
ALGORITHMS = ('propagate', 'dsatur')

# repeated-trial driver
DEFAULT_TRIALS = 100

# the repair loop gets at least this many passes, more on large graphs
MIN_REPAIR_PASSES = 16

# registration file: STUDENT_ID|COURSE1,COURSE2,...
FIELD_SEPARATOR = '|'
COURSE_SEPARATOR = ','

SLOT_LABEL = 'Time Slot {}'
