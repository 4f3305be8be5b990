"""Shortcode generation utility

Short codes are drawn uniformly at random from a cryptographically strong
source, then checked against the store for collisions.

Functions:
    generate_shortcode(length=6) -> str:
        Generate a random short code over [a-z0-9].
    allocate_shortcode(dao, attempts=10) -> str:
        Generate short codes until one is not taken (bounded retry).

Example:
    >>> from kvshortener.utils.shortener import generate_shortcode
    >>> generate_shortcode()
    'k3x9qa'
"""

import secrets
import logging

from kvshortener.constants import ShortCode
from kvshortener.dao.base import UrlRecordBaseDAO


logger = logging.getLogger(__name__)


def generate_shortcode(length: int = ShortCode.LENGTH) -> str:
    """Generate a random short code.

    Args:
        length (int, optional):
            Number of characters. Defaults to 6.

    Returns:
        str: `length` characters drawn uniformly from [a-z0-9].

    NOTE:
        - 36^6 (~2.2 billion) codes; collisions are expected to be rare but
          possible, which is why allocate_shortcode() checks the store.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(ShortCode.ALPHABET) for _ in range(length))


def allocate_shortcode(dao: UrlRecordBaseDAO, attempts: int = ShortCode.MAX_ATTEMPTS) -> str:
    """Generate a short code that isn't stored yet.

    The existence check and the later write are not atomic, so two
    concurrent creations can still pick the same code (last writer wins).
    If every attempt collides, the last generated code is returned anyway.

    Args:
        dao (UrlRecordBaseDAO):
            Store used to check for existing codes.
        attempts (int, optional):
            Maximum number of generated codes. Defaults to 10.

    Returns:
        str: allocated short code.
    """
    shortcode = generate_shortcode()
    for attempt in range(1, attempts + 1):
        if not dao.exists(shortcode):
            return shortcode
        logger.debug('Short code %s already taken (attempt %d/%d).', shortcode, attempt, attempts)
        if attempt < attempts:
            shortcode = generate_shortcode()

    logger.warning(
        'Exhausted short code attempts. Proceeding with a colliding short code.',
        extra={'shortcode': shortcode, 'attempts': attempts},
    )
    return shortcode
