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

import datetime
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import MalformedResponse

__all__ = ()

BASE_URL = 'https://botlist.space'

M = TypeVar('M', bound='BaseObject')


def from_timestamp(timestamp: Optional[int]) -> Optional[datetime.datetime]:
    """Converts a millisecond UNIX timestamp into an aware UTC datetime."""
    if timestamp is None:
        return None
    return datetime.datetime.fromtimestamp(timestamp / 1000, tz=datetime.timezone.utc)


class BaseObject(BaseModel):
    """Base for the read-only models built from API payloads.

    Fields are frozen once validated; unknown wire fields are ignored.
    """

    model_config = ConfigDict(frozen=True, extra='ignore')

    @classmethod
    def from_data(cls: Type[M], data: Any) -> M:
        """Builds the model from a decoded payload.

        Raises
        -------
        MalformedResponse
            The payload is not an object or a required field is missing or mistyped.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise MalformedResponse(data, f'Invalid {cls.__name__} payload: {e}') from e
