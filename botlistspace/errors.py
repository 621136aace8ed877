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

from typing import Any, Dict, Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from aiohttp import ClientResponse

__all__ = (
    'BotlistSpaceException',
    'InvalidArgument',
    'MalformedResponse',
    'HTTPException',
)


class BotlistSpaceException(Exception):
    """Base exception class for botlistspace.py

    Ideally speaking, this could be caught to handle any exceptions raised from this library.
    """

    pass


class InvalidArgument(BotlistSpaceException):
    """Exception that's raised when an argument to a function
    is invalid some way (e.g. wrong type or out of range).

    This is raised eagerly, before any request is sent.
    """

    pass


class MalformedResponse(BotlistSpaceException):
    """Exception that's raised when the API returns a payload that
    cannot be turned into a model, e.g. it is not an object or has no ID.

    Attributes
    ------------
    data: Any
        The offending payload.
    """

    def __init__(self, data: Any, message: str) -> None:
        self.data: Any = data
        super().__init__(message)


class HTTPException(BotlistSpaceException):
    """Exception that's raised when an HTTP request operation fails.

    Attributes
    ------------
    response: Optional[:class:`aiohttp.ClientResponse`]
        The response of the failed HTTP request. ``None`` when the request
        never got a response, e.g. on a connection error or timeout.
    status: :class:`int`
        The status code of the HTTP request, ``0`` if there was no response.
    text: :class:`str`
        The text of the error. Could be an empty string.
    code: :class:`int`
        The API specific error code for the failure, ``0`` if none was given.
    """

    def __init__(
        self,
        response: Optional['ClientResponse'],
        message: Optional[Union[str, Dict[str, Any]]],
    ) -> None:
        self.response: Optional['ClientResponse'] = response
        self.status: int = response.status if response is not None else 0
        self.code: int
        self.text: str
        if isinstance(message, dict):
            code = message.get('code')
            self.code = code if isinstance(code, int) and not isinstance(code, bool) else 0
            self.text = str(message.get('message') or '')
        else:
            self.code = 0
            self.text = '' if message is None else str(message)

        if response is None:
            super().__init__(f'Request failed: {self.text}')
            return

        fmt = '{0} {1} (error code: {2})'
        if len(self.text):
            fmt += ': {3}'

        super().__init__(fmt.format(self.response.status, response.reason, self.code, self.text))
