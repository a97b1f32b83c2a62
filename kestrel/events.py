"""
kestrel.events
~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
import sys

from kestrel.conf import defaults

__all__ = ('Event', 'LEVELS', 'normalize_level', 'get_exc_info')

LEVELS = ('debug', 'info', 'warning', 'error', 'fatal')

_LEVEL_ALIASES = {
    'warn': 'warning',
    'critical': 'fatal',
    'exception': 'error',
}


def normalize_level(level):
    """
    Turns ``level`` into one of ``LEVELS``. Numeric levels of the
    stdlib ``logging`` module are accepted too.
    """
    if level is None:
        return defaults.LEVEL

    if isinstance(level, int) and not isinstance(level, bool):
        if level >= logging.CRITICAL:
            return 'fatal'
        if level >= logging.ERROR:
            return 'error'
        if level >= logging.WARNING:
            return 'warning'
        if level >= logging.INFO:
            return 'info'
        return 'debug'

    rv = str(level).strip().lower()
    rv = _LEVEL_ALIASES.get(rv, rv)
    if rv not in LEVELS:
        raise ValueError('Unknown level: %r' % (level,))
    return rv


def get_exc_info(exc_info=None):
    """
    Accepts an exception triple, an exception instance, or ``None`` /
    ``True`` for the exception currently being handled.
    """
    if exc_info is None or exc_info is True:
        exc_info = sys.exc_info()
        if exc_info[0] is None:
            return None
        return exc_info

    if isinstance(exc_info, BaseException):
        return (type(exc_info), exc_info, exc_info.__traceback__)

    return tuple(exc_info)


class Event(object):
    """
    What the application wants recorded: a message, an exception, or
    both, plus the metadata to file them under.

    ``breadcrumbs`` is filled in by the client when the event is
    captured.
    """

    def __init__(self, message=None, exc_info=None, level=None, tags=None,
                 extra=None, fingerprint=None, logger=None, release=None,
                 environment=None, user=None, request=None):
        if exc_info is not None:
            exc_info = get_exc_info(exc_info)
        self.message = message
        self.exc_info = exc_info
        self.level = normalize_level(level)
        self.tags = dict(tags or {})
        self.extra = dict(extra or {})
        self.fingerprint = list(fingerprint) if fingerprint else None
        self.logger = logger
        self.release = release
        self.environment = environment
        self.user = user
        self.request = request
        self.breadcrumbs = None

    def __repr__(self):
        return '<%s: %s %r>' % (type(self).__name__, self.level,
                                self.message or self.exception_type)

    @property
    def exception_type(self):
        if not self.exc_info:
            return None
        return getattr(self.exc_info[0], '__name__', '<unknown>')
