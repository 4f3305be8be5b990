from enum import StrEnum


class TTL:
    """Durations in milliseconds and seconds."""

    ONE_DAY_MS = 86_400_000  # 24 * 60 * 60 * 1000
    THIRTY_DAYS_MS = 2_592_000_000  # 30 * ONE_DAY_MS


class ShortCode:
    """Short code generation parameters."""

    ALPHABET = 'abcdefghijklmnopqrstuvwxyz0123456789'
    LENGTH = 6
    MAX_ATTEMPTS = 10


class Paging:
    """Page sizes and scan caps for list, search and bulk delete."""

    DEFAULT_LIST_LIMIT = 50
    MAX_LIST_LIMIT = 1000
    SCAN_PAGE_SIZE = 1000
    MAX_SEARCH_SCAN = 5000
    DEFAULT_BULK_DELETE_DAYS = 120


class ExpirationType(StrEnum):
    PERMANENT = 'permanent'
    THIRTY_DAYS = '30days'


class RedirectCountingMode(StrEnum):
    EMBEDDED = 'embedded'  # counter folded into the record (read-modify-write)
    CELL = 'cell'  # dedicated per-code counting cell (atomic)


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
STORAGE_FAILURE = 'STORAGE_FAILURE'
