import numbers


def _same_id(a, b):
    if isinstance(a, numbers.Integral) or isinstance(b, numbers.Integral):
        try:
            return int(a) == int(b)
        except (TypeError, ValueError):
            return False
    return str(a) == str(b)


class Collection(list):
    """
    An ordered list of model instances fetched from a remote application.

    :param items: model instances
    :param model: the class of the elements; used by :meth:`build` and :meth:`create`
    :param parent: the instance owning this collection, if it was loaded through an association
    """

    def __init__(self, items=(), model=None, parent=None):
        super(Collection, self).__init__(items)
        self.model = model
        self.parent = parent

    def _new(self, items):
        return Collection(items, model=self.model, parent=self.parent)

    def find(self, id):
        for item in self:
            if _same_id(item.id, id):
                return item
        return None

    def where(self, predicate=None, **attrs):
        if predicate is None:
            def predicate(item):
                return all(getattr(item, key, None) == value for key, value in attrs.items())

        return self._new(item for item in self if predicate(item))

    def order(self, *names):
        return self._new(sorted(self, key=lambda item: tuple(getattr(item, name) for name in names)))

    def all(self):
        return self

    def _foreign_key(self):
        return '{}_id'.format(self.parent.base_class().meta.name)

    def _scoped(self, attrs):
        if self.parent is not None and getattr(self.parent, 'id', None) is not None:
            attrs.setdefault(self._foreign_key(), self.parent.id)
        return attrs

    def build(self, **attrs):
        """
        Instantiate a new element with the foreign key to :attr:`parent` set and add it to the collection.
        """
        item = self.model(self._scoped(attrs))
        self.append(item)
        return item

    def create(self, **attrs):
        """
        Like :meth:`build`, but the new element is created remotely first.

        :return: the created element, or ``False`` if the remote application rejected it
        """
        item = self.model.create(**self._scoped(attrs))
        if item is not False:
            self.append(item)
        return item

    def __repr__(self):
        return '<Collection {} {}>'.format(getattr(self.model, '__name__', None), list.__repr__(self))
