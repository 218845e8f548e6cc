import json
import logging

from .exceptions import UnboundModelError, NonJsonResponseError
from .response import classify, looks_like_html
from .signals import before_request, after_request
from .url import URL

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = range(200, 300)


def _encode(data):
    if isinstance(data, (str, bytes)):
        return data
    return json.dumps(data if data is not None else {})


class HTTPMethods(object):
    """
    Class-level HTTP verbs against the application a class fetches from.

    Responses are turned into results by :func:`response.classify`: a status of 400 or above returns ``False``
    rather than raising.
    """
    registry = None

    @classmethod
    def application(cls, app=None):
        if cls.registry is None:
            raise UnboundModelError(cls)
        return cls.registry.get(app if app is not None else cls.meta.app)

    @classmethod
    def connection(cls, app=None):
        return cls.application(app).connection()

    @classmethod
    def _request(cls, method, path, app=None, **kwargs):
        path = URL(path)
        connection = cls.connection(app)

        before_request.send(cls, method=method, path=path, **kwargs)
        logger.debug('-> %s %s', method, path)

        response = connection.request(method, path, **kwargs)

        logger.debug('<- %s %s %s', response.status_code, method, path)
        after_request.send(cls, method=method, path=path, response=response)
        return response

    @classmethod
    def get(cls, path, params=None, model=None, parent=None, app=None):
        """
        :return: a :class:`Collection` for an array, a model instance for an object, otherwise the parsed body
        """
        response = cls._request('GET', path, app=app, params=params)
        return classify(response, model or cls, parent)

    @classmethod
    def post(cls, path, data=None, headers=None, model=None, parent=None, app=None):
        """
        Send ``data`` JSON-encoded; the ``Content-Type`` is ``application/json`` unless ``headers`` says otherwise.
        The remote application is expected to respond with the created object.
        """
        headers = dict({'Content-Type': 'application/json'}, **(headers or {}))
        response = cls._request('POST', path, app=app, data=_encode(data), headers=headers)
        return classify(response, model or cls, parent)

    @classmethod
    def put(cls, path, data=None, headers=None, app=None):
        headers = dict({'Content-Type': 'application/json'}, **(headers or {}))
        response = cls._request('PUT', path, app=app, data=_encode(data), headers=headers)
        return classify(response, cls)

    @classmethod
    def http_delete(cls, path, app=None):
        """
        :return: ``True`` if the response status is 2xx
        """
        response = cls._request('DELETE', path, app=app)
        if response.status_code >= 400:
            return False
        if looks_like_html(response.text):
            raise NonJsonResponseError(response.text)
        return response.status_code in SUCCESS_STATUSES
