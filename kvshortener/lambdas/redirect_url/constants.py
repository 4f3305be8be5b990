# Logging events
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
REDIRECT_FAILED = 'REDIRECT_FAILED'
