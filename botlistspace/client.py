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

import logging
from dataclasses import dataclass
from typing import (
    Any,
    Coroutine,
    Mapping,
    Optional,
    Sequence,
    Type,
    TypeVar,
    TYPE_CHECKING,
    Union,
)

import aiohttp

from .bot import Bot
from .errors import InvalidArgument, MalformedResponse
from .http import HTTPClient, Route
from .pagination import Pagination
from .statistics import Statistics
from .upvote import Upvote
from .user import User

if TYPE_CHECKING:
    from types import TracebackType

    T = TypeVar('T')
    Response = Coroutine[Any, Any, T]

__all__ = (
    'ClientOptions',
    'Client',
)

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientOptions:
    """The immutable configuration a :class:`Client` is created with.

    Attributes
    -----------
    id: :class:`str`
        The ID of your bot.
    bot_token: :class:`str`
        The token from your bot's token page.
    user_token: Optional[:class:`str`]
        The token from your user token page. Stored for completeness only,
        no endpoint currently sends it; every authenticated call uses ``bot_token``.
    base_url: :class:`str`
        The API root.
    """

    id: str
    bot_token: str
    user_token: Optional[str] = None
    base_url: str = Route.BASE

    def __post_init__(self) -> None:
        if not isinstance(self.id, str):
            raise InvalidArgument('ID must be a string')
        if not isinstance(self.bot_token, str):
            raise InvalidArgument('Bot token must be a string')
        if self.user_token is not None and not isinstance(self.user_token, str):
            raise InvalidArgument('User token must be a string')
        if not isinstance(self.base_url, str):
            raise InvalidArgument('Base URL must be a string')

    def __repr__(self) -> str:
        # tokens stay out of logs and tracebacks
        return f'<ClientOptions id={self.id!r} base_url={self.base_url!r}>'


def _check_id(value: Any, name: str) -> None:
    if not isinstance(value, str):
        raise InvalidArgument(f'{name} must be a string')


def _check_page(page: Any) -> None:
    if not isinstance(page, int) or isinstance(page, bool):
        raise InvalidArgument('Page must be an int')
    if page < 1:
        raise InvalidArgument('Page must be an int greater than 0')


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class Client:
    """Represents a client connection to the botlist.space API.

    Every method checks its arguments as soon as it is called and raises
    :exc:`InvalidArgument` right away, then returns an awaitable that makes
    exactly one request.

    .. container:: operations

        .. describe:: async with x

            Closes the underlying HTTP session on exit.

    Parameters
    -----------
    id: :class:`str`
        The ID of your bot.
    bot_token: :class:`str`
        The token from your bot's token page.
    user_token: Optional[:class:`str`]
        The token from your user token page. Currently unused by every endpoint.
    base_url: :class:`str`
        The API root. Defaults to the v1 API.
    session: Optional[:class:`aiohttp.ClientSession`]
        A session to send requests with instead of creating one.
    http: Optional[:class:`HTTPClient`]
        A ready transport to use. ``session`` and ``base_url`` are ignored when given.

    Raises
    -------
    InvalidArgument
        An option has the wrong type.
    """

    def __init__(
        self,
        id: str,
        bot_token: str,
        *,
        user_token: Optional[str] = None,
        base_url: str = Route.BASE,
        session: Optional[aiohttp.ClientSession] = None,
        http: Optional[HTTPClient] = None,
    ) -> None:
        self.options: ClientOptions = ClientOptions(id=id, bot_token=bot_token, user_token=user_token, base_url=base_url)
        if http is None:
            http = HTTPClient(session, base_url=self.options.base_url, token=self.options.bot_token)
        self.http: HTTPClient = http

    def __repr__(self) -> str:
        return f'<Client id={self.id!r}>'

    async def __aenter__(self) -> 'Client':
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_value: Optional[BaseException],
        traceback: Optional['TracebackType'],
    ) -> None:
        await self.close()

    @property
    def id(self) -> str:
        """:class:`str`: The ID of the bot this client acts for."""
        return self.options.id

    async def close(self) -> None:
        """Closes the HTTP session if the client created it."""
        await self.http.close()

    # helpers

    @staticmethod
    def _paginate(data: Any, key: str, cls: Type[Union[Bot, Upvote]]) -> Pagination:
        if not isinstance(data, Mapping):
            raise MalformedResponse(data, f'Expected a page object, got {type(data).__name__}')
        pagination = Pagination(data)
        for raw in data.get(key) or ():
            item = cls.from_data(raw)
            pagination.set(item.id, item)
        return pagination

    async def _fetch_statistics(self) -> Statistics:
        data = await self.http.get_statistics()
        return Statistics.from_data(data)

    async def _fetch_bots(self, page: int) -> Pagination:
        data = await self.http.get_bots(page)
        return self._paginate(data, 'bots', Bot)

    async def _fetch_bot(self, bot_id: str) -> Bot:
        data = await self.http.get_bot(bot_id)
        return Bot.from_data(data)

    async def _fetch_upvotes(self, page: int) -> Pagination:
        data = await self.http.get_upvotes(self.id, page)
        return self._paginate(data, 'upvotes', Upvote)

    async def _fetch_has_upvoted(self, user_id: str) -> bool:
        upvotes = await self._fetch_upvotes(1)
        return upvotes.has(user_id)

    async def _post_count(self, payload: Mapping[str, Any]) -> None:
        await self.http.post_stats(self.id, dict(payload))
        _log.debug('Posted %s for bot %s', payload, self.id)

    async def _fetch_user(self, user_id: str) -> User:
        data = await self.http.get_user(user_id)
        return User.from_data(data)

    async def _fetch_user_bots(self, user_id: str, page: int) -> Pagination:
        data = await self.http.get_user_bots(user_id, page)
        return self._paginate(data, 'bots', Bot)

    # endpoints

    def get_statistics(self) -> 'Response[Statistics]':
        """|coro|

        Retrieves basic information about the site.

        Raises
        -------
        HTTPException
            Retrieving the statistics failed.

        Returns
        --------
        :class:`Statistics`
        """
        return self._fetch_statistics()

    def get_all_bots(self, page: int = 1) -> 'Response[Pagination]':
        """|coro|

        Retrieves a page of every bot listed on the site.

        Parameters
        -----------
        page: :class:`int`
            The 1-based page to get.

        Raises
        -------
        InvalidArgument
            ``page`` is not an int greater than 0.
        HTTPException
            Retrieving the bots failed.

        Returns
        --------
        :class:`Pagination`
            The page's :class:`Bot` objects keyed by ID.
        """
        _check_page(page)
        return self._fetch_bots(page)

    def get_bot(self, id: str) -> 'Response[Bot]':
        """|coro|

        Retrieves a single bot.

        Raises
        -------
        InvalidArgument
            ``id`` is not a string.
        HTTPException
            Retrieving the bot failed.
        """
        _check_id(id, 'ID')
        return self._fetch_bot(id)

    def get_upvotes(self, page: int = 1) -> 'Response[Pagination]':
        """|coro|

        Retrieves a page of upvotes for your bot. Uses the bot token.

        Raises
        -------
        InvalidArgument
            ``page`` is not an int greater than 0.
        HTTPException
            Retrieving the upvotes failed.

        Returns
        --------
        :class:`Pagination`
            The page's :class:`Upvote` objects keyed by the upvoting user's ID.
        """
        _check_page(page)
        return self._fetch_upvotes(page)

    def has_upvoted(self, user_id: str) -> 'Response[bool]':
        """|coro|

        Checks whether a user has upvoted your bot.

        Only the first page of :meth:`get_upvotes` is looked at.

        Raises
        -------
        InvalidArgument
            ``user_id`` is not a string.
        HTTPException
            Retrieving the upvotes failed.
        """
        _check_id(user_id, 'User ID')
        return self._fetch_has_upvoted(user_id)

    def get_self_bot(self) -> 'Response[Bot]':
        """|coro|

        Retrieves your own bot. Equivalent to ``get_bot(client.id)``.
        """
        return self.get_bot(self.id)

    def post_server_count(self, count: Union[int, Sequence[int]]) -> 'Response[None]':
        """|coro|

        Posts your bot's server count to the site. Uses the bot token.

        Parameters
        -----------
        count: Union[:class:`int`, Sequence[:class:`int`]]
            The total server count, or a list with the server count of each shard.

        Raises
        -------
        InvalidArgument
            ``count`` is neither a non-negative int nor a list of them.
        HTTPException
            Posting the count failed.
        """
        if isinstance(count, (list, tuple)):
            if not all(_is_count(shard) for shard in count):
                raise InvalidArgument('Shard counts must be non-negative ints')
            payload = {'shards': list(count)}
        elif _is_count(count):
            payload = {'server_count': count}
        else:
            raise InvalidArgument('Server count is not a non-negative int nor a list of shard counts')
        return self._post_count(payload)

    def get_user(self, id: str) -> 'Response[User]':
        """|coro|

        Retrieves a single user.

        Raises
        -------
        InvalidArgument
            ``id`` is not a string.
        HTTPException
            Retrieving the user failed.
        """
        _check_id(id, 'User ID')
        return self._fetch_user(id)

    def get_user_bots(self, id: str, page: int = 1) -> 'Response[Pagination]':
        """|coro|

        Retrieves a page of the bots a user owns.

        Raises
        -------
        InvalidArgument
            ``id`` is not a string or ``page`` is not an int greater than 0.
        HTTPException
            Retrieving the bots failed.
        """
        _check_id(id, 'User ID')
        _check_page(page)
        return self._fetch_user_bots(id, page)
