from kvshortener.utils.config import app_env, app_name, app_prefix, load_config
from kvshortener.utils.helpers import base_url, get_short_url, now_ms, require_environment
from kvshortener.utils.shortener import generate_shortcode, allocate_shortcode
from kvshortener.utils.urls import normalize_url
from kvshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'allocate_shortcode',
    'normalize_url',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'base_url',
    'get_short_url',
    'now_ms',
    'require_environment',
    'initialize_logging',
]
