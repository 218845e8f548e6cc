import re

from .collection import Collection
from .exceptions import NonJsonResponseError

_HTML = re.compile(r'^\s*(<!doctype\s+html|<html[\s>])', re.IGNORECASE)

_EMPTY = object()


def looks_like_html(text):
    return bool(_HTML.match(text or ''))


def decode(response):
    """
    Decode the JSON body of a response.

    Returns ``_EMPTY`` for a blank body and ``None`` for a body that is neither JSON nor HTML.

    :raises NonJsonResponseError: if the body is an HTML document
    """
    text = response.text
    if not text or not text.strip():
        return _EMPTY

    try:
        return response.json()
    except ValueError:
        if looks_like_html(text):
            raise NonJsonResponseError(text)
        return None


def classify(response, model, parent=None):
    """
    Turn a response into a result.

    ============================  =====================================================
    Response                      Result
    ============================  =====================================================
    status >= 400                 ``False``
    HTML document                 raises :class:`NonJsonResponseError`
    empty body, ``[]``, ``{}``    an empty :class:`Collection` of ``model``
    array of objects              :class:`Collection` of ``model`` instances, in order
    JSON object                   a single ``model`` instance
    anything else                 the decoded value
    ============================  =====================================================

    :param requests.Response response: response
    :param model: class used to materialize objects
    :param parent: owner of a resulting collection
    """
    if response.status_code >= 400:
        return False

    body = decode(response)

    if body is _EMPTY or (isinstance(body, (list, dict)) and not body):
        return Collection(model=model, parent=parent)

    if isinstance(body, list) and all(isinstance(item, dict) for item in body):
        return Collection((model(item) for item in body), model=model, parent=parent)

    if isinstance(body, dict):
        return model(body)

    return body
