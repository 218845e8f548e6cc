class AssociationCache(object):
    """
    Per-instance memo of fetched association results.

    A name is either unfetched or cached. A cached value is returned as-is, including a cached ``False``, until
    the association is loaded again with ``reload=True``. There is no expiry and no locking.
    """

    def __init__(self):
        self._values = {}

    def get(self, name, loader, reload=False):
        if reload or name not in self._values:
            self._values[name] = loader()
        return self._values[name]

    def is_cached(self, name):
        return name in self._values

    def peek(self, name, default=None):
        return self._values.get(name, default)

    def clear(self, name=None):
        if name is None:
            self._values.clear()
        else:
            self._values.pop(name, None)

    def __contains__(self, name):
        return name in self._values

    def __repr__(self):
        return '<AssociationCache {}>'.format(sorted(self._values))


def cache_for(instance):
    """
    Return the :class:`AssociationCache` of an instance, creating it on first use.
    """
    try:
        return instance.__dict__['_remote_cache']
    except KeyError:
        cache = instance.__dict__['_remote_cache'] = AssociationCache()
        return cache
