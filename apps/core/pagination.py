"""
Pagination metadata returned by list endpoints.
"""
import math
from dataclasses import asdict, dataclass

DEFAULT_PAGE_SIZE = 10


@dataclass
class Pagination:
    """Pagination block: ``total``, ``page``, ``limit`` and ``pages``."""
    total: int = 0
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    pages: int = 0

    @classmethod
    def from_payload(cls, payload, item_count=0, params=None):
        """
        Read pagination from a list payload.
        Supports a nested ``pagination`` object or flat ``total``/``page``/``pages`` keys;
        plain list payloads describe a single page.
        """
        params = params or {}
        block = {}
        if isinstance(payload, dict):
            block = payload.get('pagination') or payload

        limit = _as_int(block.get('limit'), _as_int(params.get('limit'), DEFAULT_PAGE_SIZE))
        total = _as_int(block.get('total'), item_count)
        page = _as_int(block.get('page'), _as_int(params.get('page'), 1))
        pages = block.get('pages')
        if pages is None:
            pages = math.ceil(total / limit) if limit else 1
        return cls(total=total, page=page, limit=limit, pages=_as_int(pages, 0))

    @property
    def has_more(self):
        return self.page < self.pages

    def to_dict(self):
        return asdict(self)


def _as_int(value, default):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
