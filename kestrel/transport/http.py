"""
kestrel.transport.http
~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from contextlib import closing
from urllib.request import Request

from kestrel.conf import defaults
from kestrel.transport.base import Transport, decode_body
from kestrel.utils.http import urlopen


class HTTPTransport(Transport):

    scheme = ['http', 'https', 'sync+http', 'sync+https']

    def __init__(self, verify_ssl=defaults.VERIFY_SSL,
                 ca_certs=defaults.CA_BUNDLE):
        if isinstance(verify_ssl, str):
            verify_ssl = bool(int(verify_ssl))

        self.verify_ssl = verify_ssl
        self.ca_certs = ca_certs

    def send(self, url, data, headers, timeout=defaults.TIMEOUT):
        """
        Sends a request to a remote webserver using HTTP POST.
        """
        req = Request(url, data=data, headers=headers, method='POST')

        response = urlopen(
            url=req,
            timeout=timeout,
            verify_ssl=self.verify_ssl,
            ca_certs=self.ca_certs,
        )
        with closing(response):
            body = response.read()
            content_encoding = response.headers.get('Content-Encoding')

        return decode_body(body, content_encoding) or None
