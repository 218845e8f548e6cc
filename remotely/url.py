import re

_SEPARATORS = re.compile(r'/{2,}')


def _flatten(fragments):
    for fragment in fragments:
        if isinstance(fragment, (list, tuple)):
            for f in _flatten(fragment):
                yield f
        elif fragment is not None:
            yield fragment


class URL(str):
    """
    A normalized, immutable request path.

    Fragments are joined with ``/``; runs of separators collapse into one and a trailing separator is removed.
    ``None`` fragments are skipped and nested lists are flattened.

    .. code-block:: python

        URL('a', '/', 'b') == '/a/b'
        URL('a', 'b') + URL('c') == '/a/b/c'
        URL('a', 'b') - URL('b') == '/a'

    """

    def __new__(cls, *fragments):
        url = _SEPARATORS.sub('/', '/' + '/'.join(str(f) for f in _flatten(fragments)))
        if len(url) > 1 and url.endswith('/'):
            url = url[:-1]
        return super(URL, cls).__new__(cls, url)

    def __add__(self, other):
        return URL(str(self), str(other))

    def __radd__(self, other):
        return URL(str(other), str(self))

    def __sub__(self, other):
        return URL(str(self).replace(str(other), '', 1))

    def __repr__(self):
        return "URL('{}')".format(str(self))
