'''
botlist.space API Wrapper
~~~~~~~~~~~~~~~~~~~~~~~~~

An async wrapper for the botlist.space API.

:copyright: (c) 2022-present KingMigDOR

'''

__title__ = 'botlistspace.py'
__author__ = 'KingMigDOR'
__license__ = 'MIT'
__copyright__ = 'Copyright (c) 2022-present KingMigDOR'
__version__ = '1.0.0'

__path__ = __import__('pkgutil').extend_path(__path__, __name__)

import logging

from .bot import *
from .client import *
from .collection import *
from .errors import *
from .http import *
from .pagination import *
from .statistics import *
from .upvote import *
from .user import *

logging.getLogger(__name__).addHandler(logging.NullHandler())
