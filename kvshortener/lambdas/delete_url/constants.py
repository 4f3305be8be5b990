# Logging events
URL_DELETED = 'URL_DELETED'
DELETE_FAILED = 'DELETE_FAILED'
