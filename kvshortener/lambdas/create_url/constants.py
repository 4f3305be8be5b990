# Logging events
URL_CREATED = 'URL_CREATED'
CREATE_FAILED = 'CREATE_FAILED'
