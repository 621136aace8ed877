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

from typing import Dict, Optional

from pydantic import Field

from .utils import BASE_URL, BaseObject

__all__ = ('User',)


class User(BaseObject):
    """Represents a user registered on botlist.space.

    .. container:: operations

        .. describe:: x == y

            Checks if two users are equal.

        .. describe:: str(x)

            Returns the user's tag, e.g. ``name#1234``.

    Attributes
    -----------
    id: :class:`str`
        The user's Discord ID.
    username: Optional[:class:`str`]
        The user's username.
    discriminator: Optional[:class:`str`]
        The user's discriminator.
    avatar_url: Optional[:class:`str`]
        The URL of the user's avatar. Not guaranteed to be available from Discord.
    short_description: Optional[:class:`str`]
        The biography the user set on their profile.
    links: Optional[Dict[:class:`str`, :class:`str`]]
        The user's social links.
    """

    id: str
    username: Optional[str] = None
    discriminator: Optional[str] = None
    avatar_url: Optional[str] = Field(default=None, alias='avatar')
    short_description: Optional[str] = None
    links: Optional[Dict[str, str]] = None

    def __str__(self) -> str:
        return self.tag

    def __eq__(self, other: object) -> bool:
        return isinstance(other, User) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def tag(self) -> str:
        """:class:`str`: The username and discriminator joined with a ``#``."""
        return f'{self.username}#{self.discriminator}'

    @property
    def url(self) -> str:
        """:class:`str`: The user's profile page on the site."""
        return f'{BASE_URL}/user/{self.id}'
