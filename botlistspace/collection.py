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

import random
from typing import Hashable, List, Optional, Tuple, TypeVar

from .errors import InvalidArgument

__all__ = ('Collection',)

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


def _check_count(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise InvalidArgument('Count must be an int')
    if n < 0:
        raise InvalidArgument('Count must be a non-negative int')


class Collection(dict):
    """A :class:`dict` keyed by ID that keeps insertion order.

    Setting a key that is already present replaces its value but keeps
    the key at its original position; delete it first to move it to the end.

    .. container:: operations

        .. describe:: len(x)

            Returns the number of entries.

        .. describe:: iter(x)

            Iterates over the keys in insertion order.
    """

    def set(self, key: K, value: V) -> 'Collection':
        """Inserts or replaces ``key``. Returns the collection for chaining."""
        self[key] = value
        return self

    def has(self, key: K) -> bool:
        return key in self

    def delete(self, key: K) -> bool:
        """Removes ``key`` if present.

        Returns
        --------
        :class:`bool`
            Whether an entry was removed.
        """
        try:
            del self[key]
        except KeyError:
            return False
        return True

    def first(self) -> Optional[V]:
        """The first value in insertion order, or ``None`` if empty."""
        return next(iter(self.values()), None)

    def first_n(self, n: int) -> List[V]:
        """Up to ``n`` values from the start, in insertion order."""
        _check_count(n)
        return self.array()[:n]

    def last(self) -> Optional[V]:
        """The last value in insertion order, or ``None`` if empty."""
        return next(reversed(self.values()), None)

    def last_n(self, n: int) -> List[V]:
        """Up to ``n`` values from the end, in insertion order."""
        _check_count(n)
        if n == 0:
            return []
        return self.array()[-n:]

    def random(self) -> Optional[V]:
        """A random value, or ``None`` if empty. Not suitable for security purposes."""
        if not self:
            return None
        return random.choice(self.array())

    def random_n(self, n: int) -> List[V]:
        """Up to ``n`` distinct values in no particular order."""
        _check_count(n)
        values = self.array()
        return random.sample(values, min(n, len(values)))

    def array(self) -> List[V]:
        return list(self.values())

    def key_array(self) -> List[K]:
        return list(self.keys())

    def entry_array(self) -> List[Tuple[K, V]]:
        return list(self.items())

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} size={len(self)}>'
