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
from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field, field_validator

from .collection import Collection
from .user import User
from .utils import BASE_URL, BaseObject, from_timestamp

__all__ = ('Bot',)


class Bot(BaseObject):
    """Represents a bot listed on botlist.space.

    .. container:: operations

        .. describe:: x == y

            Checks if two bots are equal.

        .. describe:: str(x)

            Returns the bot's tag.

    Attributes
    -----------
    id: :class:`str`
        The bot's Discord ID.
    username: Optional[:class:`str`]
        The bot's username.
    discriminator: Optional[:class:`str`]
        The bot's discriminator.
    short_description: Optional[:class:`str`]
        A short description of what the bot does.
    full_description: Optional[:class:`str`]
        The detailed description of the bot. Contains Markdown, may be blank.
    avatar_url: Optional[:class:`str`]
        The URL of the bot's avatar. Not guaranteed to be available from Discord.
    invite: Optional[:class:`str`]
        The invite URL provided by the owner.
    avatar_child_friendly: Optional[:class:`bool`]
        Whether the avatar is considered child friendly.
    library: Optional[:class:`str`]
        The library the bot is written with.
    prefix: Optional[:class:`str`]
        The prefix used to invoke the bot's commands.
    owners: :class:`Collection`
        The bot's owners as :class:`User` objects, keyed by ID.
    vanity: Optional[:class:`str`]
        The bot's vanity slug, if it has one.
    links: Optional[Dict[:class:`str`, :class:`str`]]
        The bot's social links.
    created_timestamp: Optional[:class:`int`]
        When the bot was added, in milliseconds since the epoch.
    updated_timestamp: Optional[:class:`int`]
        When the bot was last updated, in milliseconds since the epoch.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: str
    username: Optional[str] = None
    discriminator: Optional[str] = None
    short_description: Optional[str] = None
    full_description: Optional[str] = None
    avatar_url: Optional[str] = Field(default=None, alias='avatar')
    invite: Optional[str] = None
    avatar_child_friendly: Optional[bool] = Field(default=None, alias='avatarChildFriendly')
    library: Optional[str] = None
    prefix: Optional[str] = None
    owners: Collection = Field(default_factory=Collection)
    vanity: Optional[str] = None
    links: Optional[Dict[str, str]] = None
    created_timestamp: Optional[int] = Field(default=None, alias='created_at')
    updated_timestamp: Optional[int] = Field(default=None, alias='updated_at')

    @field_validator('owners', mode='before')
    @classmethod
    def wrap_owners(cls, value: Any) -> Collection:
        owners = Collection()
        for raw in value or ():
            user = User.model_validate(raw)
            owners.set(user.id, user)
        return owners

    def __str__(self) -> str:
        return self.tag

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Bot) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def tag(self) -> str:
        """:class:`str`: The username and discriminator joined with a ``#``."""
        return f'{self.username}#{self.discriminator}'

    @property
    def url(self) -> str:
        """:class:`str`: The bot's page on the site."""
        return f'{BASE_URL}/bot/{self.id}'

    def is_nsfw(self) -> bool:
        """:class:`bool`: Whether the avatar is not considered child friendly."""
        return not self.avatar_child_friendly

    @property
    def created_at(self) -> Optional[datetime.datetime]:
        """Optional[:class:`datetime.datetime`]: When the bot was added to the site, in UTC."""
        return from_timestamp(self.created_timestamp)

    @property
    def updated_at(self) -> Optional[datetime.datetime]:
        """Optional[:class:`datetime.datetime`]: When the bot was last updated, in UTC."""
        return from_timestamp(self.updated_timestamp)
