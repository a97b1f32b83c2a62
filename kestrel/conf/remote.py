from urllib.parse import parse_qsl, urlparse

from kestrel.exceptions import InvalidDsn

ERR_UNKNOWN_SCHEME = 'Unsupported Sentry DSN scheme: {0} ({1})'
ERR_UNKNOWN_OPTION = 'Unsupported Sentry DSN option: {0} ({1})'

# query string options a DSN may carry
DSN_OPTIONS = frozenset(['timeout', 'verify_ssl', 'ca_certs'])


class Dsn(object):
    """
    The destination of a client: where packets are posted and the keys
    they are signed with. Instances are immutable.
    """
    __slots__ = ('_base_url', '_project', '_public_key', '_secret_key',
                 '_options', '_transport_cls', '_uri')

    def __init__(self, base_url, project, public_key, secret_key=None,
                 options=None, transport=None):
        if not project:
            raise InvalidDsn('A DSN requires a project id')
        if not public_key:
            raise InvalidDsn('A DSN requires a public key')
        if not base_url:
            raise InvalidDsn('A DSN requires a server address')

        base_url = base_url.rstrip('/')
        setter = super(Dsn, self).__setattr__
        setter('_base_url', base_url)
        setter('_project', str(project))
        setter('_public_key', public_key)
        setter('_secret_key', secret_key or None)
        setter('_options', dict(options or {}))
        setter('_transport_cls', transport)
        setter('_uri', '%s/api/%s/store/' % (base_url, project))

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % type(self).__name__)

    def __delattr__(self, name):
        raise AttributeError('%s is immutable' % type(self).__name__)

    def __repr__(self):
        return '<%s: %s>' % (type(self).__name__, self.get_public_dsn())

    def __eq__(self, other):
        if not isinstance(other, Dsn):
            return NotImplemented
        return (self.uri, self.public_key, self.secret_key) == \
            (other.uri, other.public_key, other.secret_key)

    def __ne__(self, other):
        rv = self.__eq__(other)
        if rv is NotImplemented:
            return rv
        return not rv

    def __hash__(self):
        return hash((self.uri, self.public_key, self.secret_key))

    @property
    def base_url(self):
        return self._base_url

    @property
    def project(self):
        return self._project

    @property
    def public_key(self):
        return self._public_key

    @property
    def secret_key(self):
        return self._secret_key

    @property
    def options(self):
        # options came from the DSN query string, e.g. ?timeout=30
        return dict(self._options)

    @property
    def transport_cls(self):
        return self._transport_cls

    @property
    def uri(self):
        """The store endpoint packets are posted to."""
        return self._uri

    def get_public_dsn(self):
        url = urlparse(self.base_url)
        netloc = url.hostname
        if url.port:
            netloc += ':%s' % url.port
        return '//%s@%s%s/%s' % (self.public_key, netloc, url.path, self.project)

    @classmethod
    def from_string(cls, value, transport=None, transport_registry=None):
        url = urlparse(value)

        if transport is None:
            if not transport_registry:
                from kestrel.transport import TransportRegistry, default_transports
                transport_registry = TransportRegistry(default_transports)

            if not transport_registry.supported_scheme(url.scheme):
                raise InvalidDsn(ERR_UNKNOWN_SCHEME.format(url.scheme, value))

            transport = transport_registry.get_transport_cls(url.scheme)

        try:
            port = url.port
        except ValueError:
            raise InvalidDsn('Invalid Sentry DSN: %r' % value)

        netloc = url.hostname
        if netloc and port:
            netloc += ':%s' % port

        path_bits = url.path.rsplit('/', 1)
        if len(path_bits) > 1:
            path = path_bits[0]
        else:
            path = ''
        project = path_bits[-1]

        if not all([netloc, project, url.username]):
            raise InvalidDsn('Invalid Sentry DSN: %r' % url.geturl())

        options = dict(parse_qsl(url.query))
        for key in options:
            if key not in DSN_OPTIONS:
                raise InvalidDsn(ERR_UNKNOWN_OPTION.format(key, value))

        base_url = '%s://%s%s' % (url.scheme.rsplit('+', 1)[-1], netloc, path)

        return cls(
            base_url=base_url,
            project=project,
            public_key=url.username,
            secret_key=url.password,
            options=options,
            transport=transport,
        )
