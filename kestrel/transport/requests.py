"""
kestrel.transport.requests
~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
from contextlib import closing

from kestrel.conf import defaults
from kestrel.transport.http import HTTPTransport

try:
    import requests
    has_requests = True
except ImportError:
    has_requests = False


class RequestsHTTPTransport(HTTPTransport):

    scheme = ['requests+http', 'requests+https']

    def __init__(self, verify_ssl=defaults.VERIFY_SSL,
                 ca_certs=defaults.CA_BUNDLE):
        if not has_requests:
            raise ImportError('RequestsHTTPTransport requires requests.')

        super(RequestsHTTPTransport, self).__init__(verify_ssl=verify_ssl,
                                                    ca_certs=ca_certs)

    def send(self, url, data, headers, timeout=defaults.TIMEOUT):
        verify = self.verify_ssl
        if verify and self.ca_certs:
            # If SSL verification is enabled use the provided CA bundle to
            # perform the verification.
            verify = self.ca_certs

        # requests decodes gzip and deflate response bodies on its own
        response = requests.post(url, data=data, headers=headers,
                                 verify=verify, timeout=(timeout, timeout))
        with closing(response):
            response.raise_for_status()
            return response.content or None
