from kvshortener.models.url_record import UrlRecord
from kvshortener.models.codec import encode_record, decode_record, record_payload


__all__ = [
    'UrlRecord',
    'encode_record',
    'decode_record',
    'record_payload',
]
