"""
kestrel.transport.base
~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import zlib

from kestrel.exceptions import InvalidAcknowledgment
from kestrel.utils import json
from kestrel.utils.encoding import to_unicode


class Transport(object):
    """
    All transport implementations need to subclass this class

    You must implement a send method. Transports are not bound to an
    endpoint: the client hands over the url, the encoded body, the
    headers and the timeout on every call.
    """

    scheme = []

    def send(self, url, data, headers, timeout):
        """
        You need to override this to do something with the actual
        data. Usually - this is sending to a server.

        Returns the (decoded) response body, or ``None`` when the
        server sent none. Failures are raised, never swallowed.
        """
        raise NotImplementedError


def decode_body(body, content_encoding=None):
    """
    Undoes a ``Content-Encoding`` the server applied to a response.
    """
    if not body:
        return body

    encoding = (content_encoding or '').strip().lower()
    if encoding == 'gzip':
        return zlib.decompress(body, 16 + zlib.MAX_WBITS)
    if encoding == 'deflate':
        try:
            return zlib.decompress(body)
        except zlib.error:
            # raw deflate stream without the zlib header
            return zlib.decompress(body, -zlib.MAX_WBITS)
    return body


class Acknowledgment(object):
    """
    What the server answers to a stored event. Only the ``id`` is read;
    a missing ``id`` is not an error.
    """
    __slots__ = ('id',)

    def __init__(self, id=None):
        self.id = id

    def __repr__(self):
        return '<%s: %r>' % (type(self).__name__, self.id)

    @classmethod
    def from_body(cls, body):
        try:
            value = json.loads(body)
        except json.JSONDecodeError as e:
            raise InvalidAcknowledgment('Malformed response body: %s' % e)

        if not isinstance(value, dict):
            raise InvalidAcknowledgment(
                'Expected a JSON object, got %s' % type(value).__name__)

        event_id = value.get('id')
        if event_id is not None:
            event_id = to_unicode(event_id)
        return cls(id=event_id)
