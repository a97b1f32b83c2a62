"""
kestrel.transport
~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from kestrel.transport.base import Acknowledgment, Transport  # NOQA
from kestrel.transport.exceptions import InvalidScheme, DuplicateScheme  # NOQA
from kestrel.transport.http import HTTPTransport  # NOQA
from kestrel.transport.requests import RequestsHTTPTransport  # NOQA
from kestrel.transport.registry import TransportRegistry, default_transports  # NOQA
