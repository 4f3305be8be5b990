# Logging events
LOCK_UPDATED = 'LOCK_UPDATED'
LOCK_FAILED = 'LOCK_FAILED'
