from unittest import TestCase
from urllib.parse import urlsplit

from flask import Flask, json
from requests import Response
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from remotely import Registry


def make_response(body, status_code=200):
    """
    Build a :class:`requests.Response` without sending a request.
    """
    if not isinstance(body, (str, bytes)):
        body = json.dumps(body)

    response = Response()
    response.status_code = status_code
    response._content = body.encode('utf-8') if isinstance(body, str) else body
    response.encoding = 'utf-8'
    return response


class FlaskAdapter(BaseAdapter):
    """
    A transport adapter that hands requests to a Flask application's test client and records them.
    """

    def __init__(self, app):
        super(FlaskAdapter, self).__init__()
        self.app = app
        self.requests = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        url = urlsplit(request.url)
        headers = [(k, v) for k, v in request.headers.items() if k.lower() != 'content-length']

        resp = self.app.test_client().open(url.path,
                                           method=request.method,
                                           query_string=url.query,
                                           data=request.body,
                                           headers=headers)

        response = Response()
        response.status_code = resp.status_code
        response.reason = resp.status
        response.headers = CaseInsensitiveDict(resp.headers.items())
        response._content = resp.get_data()
        response.encoding = 'utf-8'
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


class BaseTestCase(TestCase):
    url = 'http://localhost:1234'

    def setUp(self):
        super(BaseTestCase, self).setUp()
        self.app = self.create_app()
        self.adapter = FlaskAdapter(self.app)
        self.registry = Registry()
        self.registry.register('adventure_app', self.configure_app)

    def create_app(self):
        app = Flask(__name__)
        app.debug = True
        return app

    def configure_app(self, app):
        app.url = self.url
        app.use(self.mount_adapter)

    def mount_adapter(self, session):
        session.mount(self.url, self.adapter)

    @property
    def requested(self):
        return [(r.method, urlsplit(r.url).path) for r in self.adapter.requests]

    def last_request_json(self):
        return json.loads(self.adapter.requests[-1].body)

    def assertRequested(self, expected, msg=None):
        self.assertEqual(expected, self.requested, msg)
