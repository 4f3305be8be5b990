# Logging events
URLS_LISTED = 'URLS_LISTED'
LIST_FAILED = 'LIST_FAILED'
