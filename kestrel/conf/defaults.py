"""
kestrel.conf.defaults
~~~~~~~~~~~~~~~~~~~~~

Represents the default values for all client settings.

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import socket

# Seconds to wait on connect and on each read/write of a send attempt
TIMEOUT = 5

# Logger name attached to packets which do not name one
LOGGER = 'root'

# Not all environments have access to socket module, for example Google App Engine
# Need to check to see if the socket module has ``gethostname``, if it doesn't we
# will set it to None and require it passed in to ``Client`` on initializtion.
NAME = socket.gethostname() if hasattr(socket, 'gethostname') else None

# Gzip the request body
COMPRESSION = False

# Drop breadcrumbs instead of recording them
IGNORE_BREADCRUMBS = False

# Verify the server certificate on https endpoints
VERIFY_SSL = True

# Path to a CA bundle, ``None`` uses the system store
CA_BUNDLE = None

# Level given to events which do not carry one
LEVEL = 'error'
