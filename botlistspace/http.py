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

import asyncio
import json
import logging
import sys
from dataclasses import MISSING
from urllib.parse import quote as _uriquote
from typing import (
    Any,
    ClassVar,
    Coroutine,
    Dict,
    Optional,
    TypeVar,
    TYPE_CHECKING,
    Union,
)

import aiohttp

from . import __version__
from .errors import HTTPException, MalformedResponse

if TYPE_CHECKING:
    from types import TracebackType

    T = TypeVar('T')
    Response = Coroutine[Any, Any, T]

__all__ = (
    'Route',
    'HTTPClient',
)

_log = logging.getLogger(__name__)


async def json_or_text(response: aiohttp.ClientResponse) -> Union[Dict[str, Any], str, None]:
    text = await response.text(encoding='utf-8')
    if not text:
        return None
    if response.headers.get('content-type', '').startswith('application/json'):
        try:
            return json.loads(text)
        except ValueError as e:
            raise MalformedResponse(text, f'Response body is not valid JSON: {e}') from e

    return text


class Route:
    BASE: ClassVar[str] = 'https://api.botlist.space/v1'

    def __init__(self, method: str, path: str, **parameters: Any) -> None:
        self.method: str = method
        if parameters:
            path = path.format_map({k: _uriquote(v, safe='') if isinstance(v, str) else v for k, v in parameters.items()})
        self.path: str = path

    def __repr__(self) -> str:
        return f'<Route {self.method} {self.path}>'

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Route) and (self.method, self.path) == (other.method, other.path)

    def __hash__(self) -> int:
        return hash((self.method, self.path))


class HTTPClient:
    """Represents an HTTP client sending HTTP requests to the botlist.space API.

    Each :meth:`request` is a single round trip. Nothing is retried and no
    ratelimit handling is done, failures surface as :exc:`HTTPException`.

    Parameters
    -----------
    session: Optional[:class:`aiohttp.ClientSession`]
        The session to send requests with. It is left open on :meth:`close`.
        If omitted, one is created on the first request and owned by the client.
    base_url: :class:`str`
        The API root that route paths are appended to.
    token: Optional[:class:`str`]
        The bot token sent as ``Authorization`` on authenticated requests.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        *,
        base_url: str = Route.BASE,
        token: Optional[str] = None,
        connector: Optional[aiohttp.BaseConnector] = None,
    ) -> None:
        self.connector = connector
        self.__session: aiohttp.ClientSession = MISSING if session is None else session
        self._owns_session: bool = session is None
        self.base_url: str = base_url.rstrip('/')
        self.token: Optional[str] = token

        user_agent = 'botlistspace.py/{0} Python/{1[0]}.{1[1]} aiohttp/{2}'
        self.user_agent: str = user_agent.format(__version__, sys.version_info, aiohttp.__version__)

    async def __aenter__(self) -> 'HTTPClient':
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_value: Optional[BaseException],
        traceback: Optional['TracebackType'],
    ) -> None:
        await self.close()

    def recreate(self) -> None:
        if not self._owns_session:
            return
        if self.__session is MISSING or self.__session.closed:
            self.__session = aiohttp.ClientSession(connector=self.connector)

    @property
    def session(self) -> aiohttp.ClientSession:
        self.recreate()
        return self.__session

    async def request(
        self,
        route: Route,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        auth: bool = False,
    ) -> Any:
        url = self.base_url + route.path
        _log.debug('Requesting %s %s', route.method, url)

        headers: Dict[str, str] = {'User-Agent': self.user_agent}

        if auth and self.token:
            headers['Authorization'] = self.token

        kwargs: Dict[str, Any] = {'headers': headers}
        if params is not None:
            kwargs['params'] = params
        if json is not None:
            kwargs['json'] = json

        try:
            async with self.session.request(route.method, url, **kwargs) as response:
                _log.debug('%s %s with %s returned %s', route.method, url, json, response.status)
                try:
                    data = await json_or_text(response)
                except MalformedResponse as e:
                    if 300 > response.status >= 200:
                        raise
                    # undecodable error bodies are reported as text
                    data = e.data

                # success
                if 300 > response.status >= 200:
                    return data

                raise HTTPException(response, data)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            _log.debug('%s %s failed: %r', route.method, url, e)
            raise HTTPException(None, str(e) or e.__class__.__name__) from e

    async def close(self) -> None:
        if self._owns_session and self.__session is not MISSING:
            await self.__session.close()

    # Endpoints

    def get_statistics(self) -> 'Response[Dict[str, Any]]':
        return self.request(Route('GET', '/statistics'))

    def get_bots(self, page: int) -> 'Response[Dict[str, Any]]':
        return self.request(Route('GET', '/bots'), params={'page': page})

    def get_bot(self, bot_id: str) -> 'Response[Dict[str, Any]]':
        return self.request(Route('GET', '/bots/{bot_id}', bot_id=bot_id))

    def get_upvotes(self, bot_id: str, page: int) -> 'Response[Dict[str, Any]]':
        return self.request(Route('GET', '/bots/{bot_id}/upvotes', bot_id=bot_id), params={'page': page}, auth=True)

    def post_stats(self, bot_id: str, payload: Dict[str, Any]) -> 'Response[None]':
        return self.request(Route('POST', '/bots/{bot_id}', bot_id=bot_id), json=payload, auth=True)

    def get_user(self, user_id: str) -> 'Response[Dict[str, Any]]':
        return self.request(Route('GET', '/users/{user_id}', user_id=user_id))

    def get_user_bots(self, user_id: str, page: int) -> 'Response[Dict[str, Any]]':
        return self.request(Route('GET', '/users/{user_id}/bots', user_id=user_id), params={'page': page})
