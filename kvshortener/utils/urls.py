"""Absolute URL validation and normalization

normalize_url() accepts any absolute URL with a syntactically valid scheme.
URLs with a special scheme (http, https, ws, wss, ftp) must also carry a host.
The normalized form lower-cases scheme and host, drops the scheme's default
port and turns an empty path into '/':

    >>> normalize_url('HTTPS://Example.COM:443')
    'https://example.com/'
    >>> normalize_url('mailto:someone@example.com')
    'mailto:someone@example.com'
    >>> normalize_url('not a url')
    Traceback (most recent call last):
        ...
    ValueError: Invalid URL: 'not a url'
"""

import re
from urllib.parse import urlsplit, urlunsplit


__all__ = ['normalize_url']

# scheme -> default port
SPECIAL_SCHEMES = {
    'http': 80,
    'https': 443,
    'ws': 80,
    'wss': 443,
    'ftp': 21,
}

SCHEME_PATTERN = re.compile(r'[a-z][a-z0-9+.\-]*')
FORBIDDEN_HOST_CHARS = frozenset(' \t\r\n#%/<>?@[\\]^|')


def normalize_url(url: str) -> str:
    candidate = url.strip()

    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError as e:
        raise ValueError(f'Invalid URL: {url!r}') from e

    scheme = parts.scheme.lower()
    if not SCHEME_PATTERN.fullmatch(scheme) or ':' not in candidate:
        raise ValueError(f'Invalid URL: {url!r}')

    if scheme not in SPECIAL_SCHEMES:
        return urlunsplit((scheme, parts.netloc, parts.path, parts.query, parts.fragment))

    host = parts.hostname or ''
    if not host or FORBIDDEN_HOST_CHARS.intersection(host):
        raise ValueError(f'Invalid URL: {url!r}')

    if ':' in host:
        host = f'[{host}]'  # IPv6 literal
    userinfo, _, _ = parts.netloc.rpartition('@')
    netloc = f'{userinfo}@{host}' if userinfo else host
    if port is not None and port != SPECIAL_SCHEMES[scheme]:
        netloc = f'{netloc}:{port}'

    return urlunsplit((scheme, netloc, parts.path or '/', parts.query, parts.fragment))
