"""
kestrel
~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

__all__ = ('VERSION', 'Client', 'Dsn', 'Event', 'Breadcrumb', 'load')

VERSION = '1.0.0'

from kestrel.base import *  # NOQA
from kestrel.breadcrumbs import Breadcrumb  # NOQA
from kestrel.conf import *  # NOQA
from kestrel.conf.remote import Dsn  # NOQA
from kestrel.events import Event  # NOQA
