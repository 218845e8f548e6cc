import re

import requests
from requests.auth import HTTPBasicAuth

from .exceptions import ConfigurationError
from .url import URL

_SCHEME = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.\-]*://')


def _set_scheme(url):
    return url if _SCHEME.match(url) else 'http://{}'.format(url)


class Connection(object):
    """
    A transport handle scoped to the base URL of an :class:`Application`.

    :param str url: normalized base url
    :param requests.Session session: session carrying authentication and middleware
    """

    def __init__(self, url, session):
        self.url = url
        self.session = session

    def url_for(self, path):
        return self.url + str(URL(path))

    def request(self, method, path, params=None, data=None, headers=None):
        return self.session.request(method, self.url_for(path), params=params, data=data, headers=headers)

    def get(self, path, params=None, headers=None):
        return self.request('GET', path, params=params, headers=headers)

    def post(self, path, data=None, headers=None):
        return self.request('POST', path, data=data, headers=headers)

    def put(self, path, data=None, headers=None):
        return self.request('PUT', path, data=data, headers=headers)

    def delete(self, path, headers=None):
        return self.request('DELETE', path, headers=headers)

    def __repr__(self):
        return '<Connection {}>'.format(self.url)


class Application(object):
    """
    A named remote backend.

    Applications are configured either with a url or with a configurator callable that receives the application:

    .. code-block:: python

        def adventures(app):
            app.url = 'adventures.example.com'
            app.basic_auth('finn', 'jake')

        registry.register('adventure_app', adventures)

    Only one authentication method is in effect at a time; the last one set wins.

    :param str name: unique name of the application
    :param str url: base url; ``http://`` is assumed when no scheme is given
    :param configurator: optional callable invoked with the new application
    """

    def __init__(self, name, url=None, configurator=None):
        self.name = name
        self._url = None
        self._auth = None
        self._middleware = []
        self._connection = None

        if url is not None:
            self.url = url

        if configurator is not None:
            configurator(self)

    @property
    def url(self):
        return self._url

    @url.setter
    def url(self, url):
        self._url = _set_scheme(str(url)).rstrip('/')

    @property
    def auth(self):
        return self._auth

    @property
    def middleware(self):
        return tuple(self._middleware)

    def basic_auth(self, user, password):
        self._auth = ('basic', (user, password))

    def token_auth(self, token):
        self._auth = ('authorization', 'Token token="{}"'.format(token))

    def bearer_auth(self, token):
        self.authorization('Bearer', token)

    def authorization(self, scheme, credentials):
        self._auth = ('authorization', '{} {}'.format(scheme, credentials))

    def use(self, middleware):
        """
        Register a middleware callable. Middleware is called with the :class:`requests.Session` of the connection
        when it is built, in registration order.
        """
        self._middleware.append(middleware)
        return middleware

    def _apply_auth(self, session):
        if self._auth is None:
            return

        kind, value = self._auth
        if kind == 'basic':
            session.auth = HTTPBasicAuth(*value)
        else:
            session.headers['Authorization'] = value

    def connection(self):
        if self._connection is None:
            if self._url is None:
                raise ConfigurationError('Application "{}" has no url.'.format(self.name))

            session = requests.Session()
            session.headers['Accept'] = 'application/json'
            self._apply_auth(session)

            for middleware in self._middleware:
                middleware(session)

            self._connection = Connection(self._url, session)
        return self._connection

    def __repr__(self):
        return '<Application {} {}>'.format(self.name, self._url)
