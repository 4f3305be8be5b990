# Logging events
URLS_SEARCHED = 'URLS_SEARCHED'
SEARCH_FAILED = 'SEARCH_FAILED'
