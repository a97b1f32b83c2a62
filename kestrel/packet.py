"""
kestrel.packet
~~~~~~~~~~~~~~

Turns an ``Event`` into the dict that goes over the wire, and provides
the default user and request factories consulted while the client
prepares a packet.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import logging
import uuid

from datetime import datetime, timezone

import kestrel
from kestrel.conf import defaults
from kestrel.utils.encoding import to_unicode
from kestrel.utils.stacks import get_stack_info, iter_traceback_frames

__all__ = ('PacketFactory', 'UserFactory', 'RequestFactory')

PLATFORM_NAME = 'python'
SDK_NAME = 'kestrel-python'


class PacketFactory(object):
    """
    Builds a packet dict from an ``Event``.

    The result always carries the ``logger``, ``user``, ``request``,
    ``release`` and ``environment`` keys, set to ``None`` unless the
    event named them, so that the client can fill them in afterwards.
    """

    def __init__(self, server_name=None):
        self.server_name = server_name or defaults.NAME
        self.logger = logging.getLogger(__name__)

    def create(self, project, event):
        data = {
            'event_id': uuid.uuid4().hex,
            'project': project,
            'timestamp': datetime.now(timezone.utc),
            'platform': PLATFORM_NAME,
            'level': event.level,
            'logger': event.logger,
            'server_name': self.server_name,
            'tags': dict((k, to_unicode(v)) for k, v in event.tags.items()),
            'extra': dict(event.extra),
            'user': event.user,
            'request': event.request,
            'release': event.release,
            'environment': event.environment,
            'sdk': {
                'name': SDK_NAME,
                'version': kestrel.VERSION,
            },
        }

        if event.exc_info:
            data['exception'] = self.get_exception_interface(event.exc_info)

        data['message'] = self.get_message(event, data)

        if event.fingerprint:
            data['fingerprint'] = [to_unicode(f) for f in event.fingerprint]

        if event.breadcrumbs:
            data['breadcrumbs'] = {
                'values': [crumb.to_dict() for crumb in event.breadcrumbs],
            }

        return data

    def get_message(self, event, data):
        if event.message is not None:
            return to_unicode(event.message)
        if 'exception' in data:
            exc = data['exception']['values'][-1]
            if exc['value']:
                return '%s: %s' % (exc['type'], exc['value'])
            return exc['type']
        return ''

    def get_exception_interface(self, exc_info):
        exc_type, exc_value, exc_traceback = exc_info

        try:
            exc_module = getattr(exc_type, '__module__', None)
            if exc_module:
                exc_module = str(exc_module)

            return {
                'values': [{
                    'value': to_unicode(exc_value),
                    'type': str(getattr(exc_type, '__name__', '<unknown>')),
                    'module': exc_module,
                    'stacktrace': {
                        'frames': get_stack_info(
                            iter_traceback_frames(exc_traceback)),
                    },
                }],
            }
        finally:
            try:
                del exc_type, exc_value, exc_traceback
            except Exception as e:
                self.logger.exception(e)


class UserFactory(object):
    """
    Reads the user recorded through ``Client.user_context`` on the
    current thread.
    """
    key = 'user'

    def __init__(self, context):
        self.context = context

    def create(self):
        value = self.context.data.get(self.key)
        if not value:
            return None
        return dict(value)


class RequestFactory(UserFactory):
    """
    Reads the request recorded through ``Client.http_context`` on the
    current thread.
    """
    key = 'request'
