"""
kestrel.scrubbers
~~~~~~~~~~~~~~~~~

Scrubbers work on the serialized packet, right before it is sent, so
they can redact anything that ended up in the text no matter which
field carried it.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import re

from kestrel.utils import json, varmap


def scrub(scrubber, data):
    """
    Runs ``data`` through ``scrubber``, which is either an object with
    a ``scrub`` method or a plain callable.
    """
    if scrubber is None:
        return data
    if hasattr(scrubber, 'scrub'):
        return scrubber.scrub(data)
    return scrubber(data)


class Scrubber(object):
    def scrub(self, data):
        raise NotImplementedError


class SanitizePasswordsScrubber(Scrubber):
    """
    Asterisk out things that look like passwords, credit card numbers,
    and API keys in the JSON text of a packet.

    The text is parsed and every value is checked against the key it sits
    under, so values of any JSON type are covered. ``null`` stays ``null``.
    """

    MASK = '*' * 8
    FIELDS = frozenset([
        'password',
        'secret',
        'passwd',
        'authorization',
        'api_key',
        'apikey',
        'sentry_dsn',
        'access_token',
    ])
    VALUES_RE = re.compile(r'^(?:\d[ -]*?){13,16}$')

    def __init__(self, fields=None):
        if fields is not None:
            self.FIELDS = frozenset(f.lower() for f in fields)

    def sanitize(self, key, value):
        if value is None:
            return

        if isinstance(value, str) and self.VALUES_RE.match(value):
            return self.MASK

        if not key:  # key can be a NoneType
            return value

        key = str(key).lower()
        for field in self.FIELDS:
            if field in key:
                # store mask as a fixed length for security
                return self.MASK
        return value

    def scrub(self, data):
        return json.dumps_compact(varmap(self.sanitize, json.loads(data)))
