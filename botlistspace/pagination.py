"""
MIT License

Copyright (c) 2022-present KingMigDOR

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

import math
from typing import Any, Mapping, Optional

from .collection import Collection

__all__ = ('Pagination',)


class Pagination(Collection):
    """A single page of a paginated listing.

    Behaves like a :class:`Collection` of the page's items keyed by ID.
    Only the page metadata is read from the envelope, the items are
    added by whoever builds the page.

    Attributes
    -----------
    page: :class:`int`
        The 1-based number of this page.
    limit: Optional[:class:`int`]
        The maximum number of items per page.
    total: Optional[:class:`int`]
        The number of items across every page.
    """

    def __init__(self, data: Mapping[str, Any]) -> None:
        super().__init__()
        self.page: int = data.get('page') or 1
        self.limit: Optional[int] = data.get('limit')
        self.total: Optional[int] = data.get('total')
        self._pages: Optional[int] = data.get('pages')

    @property
    def page_count(self) -> Optional[int]:
        """Optional[:class:`int`]: The number of pages, as sent by the API or derived from ``total`` and ``limit``."""
        if self._pages is not None:
            return self._pages
        if self.total is None or not self.limit:
            return None
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        """:class:`bool`: Whether a page after this one exists."""
        page_count = self.page_count
        return page_count is not None and self.page < page_count

    def __repr__(self) -> str:
        return f'<Pagination page={self.page} page_count={self.page_count} total={self.total} size={len(self)}>'
