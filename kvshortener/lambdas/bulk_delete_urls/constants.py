# Logging events
URLS_BULK_DELETED = 'URLS_BULK_DELETED'
BULK_DELETE_FAILED = 'BULK_DELETE_FAILED'
