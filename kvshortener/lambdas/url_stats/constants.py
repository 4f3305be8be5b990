# Logging events
STATS_RETRIEVED = 'STATS_RETRIEVED'
STATS_FAILED = 'STATS_FAILED'
