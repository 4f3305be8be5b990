from kvshortener.dao.base.url_record_base_dao import UrlRecordBaseDAO, KeyPage
from kvshortener.dao.base.redirect_counter_base_dao import RedirectCounterBaseDAO, CounterStats


__all__ = [
    'UrlRecordBaseDAO',
    'KeyPage',
    'RedirectCounterBaseDAO',
    'CounterStats',
]
