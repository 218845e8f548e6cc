from collections import OrderedDict
import json

from .associations import Associations
from .autolink import autolink, link_names
from .exceptions import MissingAttributeError
from .url import URL
from .utils import pluralize


def _normalize(attributes):
    return OrderedDict((str(key), value) for key, value in attributes.items())


class Model(Associations):
    """
    An object whose attributes come from the JSON representation of a remote resource.

    Attributes are kept in an ordered dictionary and can be read and written like regular Python attributes.
    Writing an attribute that is not present, or reading one, raises :class:`AttributeError`; use
    :meth:`set_attribute` to add new ones.

    Every ``<name>_id`` attribute makes ``<name>()`` fetch the object with that id, see :mod:`remotely.autolink`.

    In addition to the :class:`Associations` options, :class:`Meta` supports:

    =====================  ==============================  ==========================================================
    Attribute name         Default                         Description
    =====================  ==============================  ==========================================================
    uri                    ``/<plural name>``              Path of the resource collection.
    savable                ``None``                        Attribute names sent by :meth:`save` when updating; all
                                                           attributes are sent if ``None``.
    =====================  ==============================  ==========================================================

    Usage example:

    .. code-block:: python

        @registry.add_model
        class Member(Model):
            adventure = BelongsTo()
            weapon = HasOne()

            class Meta:
                app = 'adventure_app'
                savable = ('name',)

        finn = Member.find(1)
        finn.name = 'Finn the Human'
        finn.save()

    """
    __abstract__ = True

    def __init__(self, attributes=None, **kwargs):
        attributes = dict(attributes or {}, **kwargs)
        self.__dict__['_attributes'] = _normalize(attributes)

    @property
    def attributes(self):
        return self._attributes

    @attributes.setter
    def attributes(self, attributes):
        self.__dict__['_attributes'] = _normalize(attributes)

    def get_attribute(self, name):
        try:
            return self._attributes[name]
        except KeyError:
            raise AttributeError("'{}' object has no attribute '{}'".format(self.__class__.__name__, name))

    def set_attribute(self, name, value):
        self._attributes[str(name)] = value

    def query_attribute(self, name):
        return bool(self.get_attribute(name))

    def __getattr__(self, name):
        attributes = self.__dict__.get('_attributes')

        if attributes is not None and not name.startswith('__'):
            if name in attributes:
                return attributes[name]

            link = autolink(self, name)
            if link is not None:
                return link

        raise AttributeError("'{}' object has no attribute '{}'".format(self.__class__.__name__, name))

    def __setattr__(self, name, value):
        # properties and associations handle their own assignment
        if name.startswith('_') or hasattr(getattr(type(self), name, None), '__set__'):
            object.__setattr__(self, name, value)
        elif name in self._attributes:
            self._attributes[name] = value
        elif hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            raise AttributeError("'{}' object has no attribute '{}'".format(self.__class__.__name__, name))

    def remote_attribute(self, name):
        if name in self._attributes:
            return self._attributes[name]
        if isinstance(getattr(type(self), name, None), property):
            return getattr(self, name)
        raise AttributeError("'{}' object has no attribute '{}'".format(self.__class__.__name__, name))

    def __dir__(self):
        return sorted(set(super(Model, self).__dir__()) | set(self._attributes) | set(link_names(self._attributes)))

    @property
    def id(self):
        return self._attributes.get(self.meta.id_attribute or 'id')

    @id.setter
    def id(self, value):
        self._attributes[self.meta.id_attribute or 'id'] = value

    @classmethod
    def uri(cls):
        if cls.meta.uri:
            return URL(cls.meta.uri)
        return URL(pluralize(cls.base_class().meta.name))

    @classmethod
    def member_uri(cls, id):
        """
        :raises MissingAttributeError: if ``id`` is ``None``
        """
        if id is None:
            raise MissingAttributeError(cls, cls.meta.id_attribute or 'id')
        return URL(cls.uri(), id)

    @classmethod
    def find(cls, id):
        """
        Fetch a single resource from ``/<uri>/<id>``.
        """
        return cls.get(cls.member_uri(id))

    @classmethod
    def where(cls, criteria=None, **kwargs):
        """
        Search resources at ``/<uri>/search``; the criteria are sent as the query string.

        :return: a :class:`Collection`, or ``False`` on failure
        """
        return cls.get(URL(cls.uri(), 'search'), params=dict(criteria or {}, **kwargs))

    @classmethod
    def all(cls):
        return cls.get(cls.uri())

    @classmethod
    def create(cls, attributes=None, **kwargs):
        """
        Create a resource. The remote application is expected to respond with the new resource, including its id.

        :return: the created object, or ``False`` on failure
        """
        return cls.post(cls.uri(), dict(attributes or {}, **kwargs))

    @classmethod
    def update(cls, id, attributes=None, **kwargs):
        return cls.put(cls.member_uri(id), dict(attributes or {}, **kwargs)) is not False

    @classmethod
    def delete_by_id(cls, id):
        return cls.http_delete(cls.member_uri(id))

    def is_new_record(self):
        return self.id is None

    def to_key(self):
        return [self.id] if self.id is not None else None

    def savable_attributes(self):
        if self.meta.savable is None:
            return OrderedDict(self._attributes)
        return OrderedDict((name, self._attributes[name]) for name in self.meta.savable if name in self._attributes)

    def save(self):
        """
        Create the resource if it has no id, otherwise update it with the savable attributes.

        :return: ``True`` on success, ``False`` if the remote application rejected the request
        """
        if self.is_new_record():
            created = type(self).create(self._attributes)
            if created is False:
                return False
            if isinstance(created, Model):
                self._attributes.update(created.attributes)
            return True

        return type(self).update(self.id, self.savable_attributes())

    def destroy(self):
        return type(self).delete_by_id(self.id)

    def reload(self):
        """
        Replace the attributes with those of a fresh copy of the resource. Cached associations are kept.

        :return: ``self``, or ``False`` if the response is a failure or not a single object
        """
        fresh = type(self).get(self.member_uri(self.id))
        if not isinstance(fresh, Model):
            return False
        self.attributes = fresh.attributes
        return self

    def as_dict(self):
        return dict(self._attributes)

    def to_json(self):
        return json.dumps(self._attributes)

    def __repr__(self):
        return '<{} {}>'.format(self.__class__.__name__, dict(self._attributes))

    class Meta:
        uri = None
        savable = None
