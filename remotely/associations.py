import logging

from .cache import cache_for
from .http import HTTPMethods
from .paths import resolve_path, attribute_value, base_resource_name, instance_id
from .reference import ModelReference
from .signals import association_loaded
from .url import URL
from .utils import AttributeDict, pluralize, singularize, classify, element_name

logger = logging.getLogger(__name__)


class Association(object):
    """
    Declares a relationship to a resource of a remote application.

    Associations are declared as class attributes of a :class:`Model` or :class:`Associations` subclass. On an
    instance, the attribute is an accessor that fetches the association on first call and returns the cached
    result afterwards; ``reload=True`` fetches it again:

    .. code-block:: python

        class Adventure(Model):
            members = HasMany()
            map = HasOne(path='/maps/:map_key')

        adventure.members()             # GET /adventures/1/members
        adventure.members()             # cached
        adventure.members(reload=True)  # GET /adventures/1/members

    :param target: the class of the fetched objects; a class, ``'self'``, the name of a class bound to the same
        registry or a ``'module.ClassName'`` path. Defaults to the singular, camel-cased association name.
    :param path: a path template with ``:attribute`` tokens, or a callable returning a path for an instance
    :param str foreign_key: attribute holding the id of the associated object (:class:`BelongsTo` only)
    :param str app: name of the application to fetch from; defaults to the application of the owning class
    """
    cardinality = None
    supports_foreign_key = False

    def __init__(self, target=None, path=None, foreign_key=None, app=None):
        self.target = target
        self.path = path
        self.foreign_key = foreign_key
        self.app = app
        self.name = None
        self.owner = None

    def bind(self, owner, name):
        if self.owner is None:
            self.owner = owner
            self.name = name

            if self.foreign_key is not None and not self.supports_foreign_key:
                logger.warning('%s.%s: foreign_key is ignored by %s associations and will fail to resolve',
                               owner.__name__, name, self.__class__.__name__)
            return self
        elif self.owner is not owner or self.name != name:
            return self.copy().bind(owner, name)
        return self

    def copy(self):
        return self.__class__(target=self.target, path=self.path, foreign_key=self.foreign_key, app=self.app)

    def target_class(self, instance):
        return ModelReference(self.target or classify(self.name)).resolve(type(instance))

    def default_path(self, instance):
        raise NotImplementedError()

    def path_for(self, instance):
        return resolve_path(instance, self)

    def fetch(self, instance):
        model = type(instance)
        path = self.path_for(instance)
        logger.debug('Fetching %s.%s from %s', model.__name__, self.name, path)

        parent = instance if self.cardinality == 'has_many' else None
        value = model.get(path, model=self.target_class(instance), parent=parent, app=self.app)

        association_loaded.send(instance, name=self.name, value=value)
        return value

    def load(self, instance, reload=False):
        return cache_for(instance).get(self.name, lambda: self.fetch(instance), reload=reload)

    def __get__(self, instance, owner):
        if instance is None:
            return self

        association = owner.remote_associations.get(self.name)
        if association is None:
            raise AttributeError("'{}' object has no attribute '{}'".format(owner.__name__, self.name))
        return BoundAssociation(instance, association)

    def __set__(self, instance, value):
        raise AttributeError("can't set remote association '{}'".format(self.name))

    def __repr__(self):
        return '<{} {}>'.format(self.__class__.__name__, self.name)


class HasMany(Association):
    """
    A one-to-many relationship, at ``/<base resources>/<id>/<plural name>`` by default.
    """
    cardinality = 'has_many'

    def default_path(self, instance):
        return URL(base_resource_name(instance), instance_id(instance), pluralize(self.name))


class HasOne(Association):
    """
    A one-to-one relationship, at ``/<base resources>/<id>/<singular name>`` by default.
    """
    cardinality = 'has_one'

    def default_path(self, instance):
        return URL(base_resource_name(instance), instance_id(instance), singularize(self.name))


class BelongsTo(Association):
    """
    A many-to-one relationship, at ``/<plural name>/<foreign key>`` by default. The foreign key is read from the
    ``<name>_id`` attribute unless ``foreign_key`` names another one.
    """
    cardinality = 'belongs_to'
    supports_foreign_key = True

    def default_path(self, instance):
        foreign_key = self.foreign_key or '{}_id'.format(self.name)
        return URL(pluralize(self.name), attribute_value(instance, foreign_key))


CARDINALITIES = {
    'has_many': HasMany,
    'has_one': HasOne,
    'belongs_to': BelongsTo
}


class BoundAssociation(object):

    def __init__(self, instance, association):
        self.instance = instance
        self.association = association

    def __call__(self, reload=False):
        return self.association.load(self.instance, reload=reload)

    @property
    def path(self):
        return self.association.path_for(self.instance)

    @property
    def loaded(self):
        return cache_for(self.instance).is_cached(self.association.name)

    def __repr__(self):
        return '<BoundAssociation {}.{}>'.format(self.instance.__class__.__name__, self.association.name)


def define_association(cls, name, cardinality, **options):
    """
    Declare an association on an existing class. Subclasses defined before this call are not affected.

    :param cls: a subclass of :class:`Associations`
    :param str name: association name
    :param cardinality: :class:`HasMany`, :class:`HasOne`, :class:`BelongsTo` or one of their names
    :return: the bound association
    """
    if not isinstance(cardinality, type):
        cardinality = CARDINALITIES[cardinality]

    association = cardinality(**options).bind(cls, name)
    cls.remote_associations[name] = association
    setattr(cls, name, association)
    return association


class AssociationsMeta(type):

    def __new__(mcs, name, bases, members):
        class_ = super(AssociationsMeta, mcs).__new__(mcs, name, bases, members)
        class_.remote_associations = associations = {}
        class_.meta = meta = AttributeDict()

        for base in bases:
            associations.update(getattr(base, 'remote_associations', None) or {})
            meta.update(getattr(base, 'meta', None) or {})

        if 'Meta' in members:
            for k, v in members['Meta'].__dict__.items():
                if not k.startswith('__'):
                    meta[k] = v

        if not members.get('Meta') or not members['Meta'].__dict__.get('name'):
            meta['name'] = element_name(name)

        parents = [base for base in bases if isinstance(base, AssociationsMeta)]
        if not parents or any(base.__dict__.get('__abstract__') for base in parents):
            class_._base_class = class_
        else:
            class_._base_class = parents[0]._base_class

        for n, m in members.items():
            if isinstance(m, Association):
                associations[n] = m.bind(class_, n)

        return class_


class Associations(HTTPMethods, metaclass=AssociationsMeta):
    """
    Adds remote associations to any class whose instances expose their attributes, such as ``id`` and foreign
    keys, as plain Python attributes.

    :class:`Meta` class attributes:

    =====================  ==============================  ==========================================================
    Attribute name         Default                         Description
    =====================  ==============================  ==========================================================
    name                   ---                             Element name of the resource; defaults to the underscored
                                                           class name. Pluralized to build default paths.
    app                    ``None``                        Name of the application to fetch from. ``None`` uses the
                                                           only registered application.
    id_attribute           ``'id'``                        Attribute identifying an instance.
    =====================  ==============================  ==========================================================

    .. attribute:: remote_associations

        A dictionary of the associations declared on the class and its bases, keyed by name. Copied from the bases
        when the class is defined.

    .. attribute:: registry

        The :class:`Registry` the class is bound to.
    """
    __abstract__ = True

    remote_associations = None
    meta = None

    @classmethod
    def base_class(cls):
        return cls._base_class

    @classmethod
    def has_many_remote(cls, name, **options):
        return define_association(cls, name, HasMany, **options)

    @classmethod
    def has_one_remote(cls, name, **options):
        return define_association(cls, name, HasOne, **options)

    @classmethod
    def belongs_to_remote(cls, name, **options):
        return define_association(cls, name, BelongsTo, **options)

    def remote_attribute(self, name):
        """
        Read an attribute for use in a request path.
        """
        return getattr(self, name)

    def path_to(self, name):
        return type(self).remote_associations[name].path_for(self)

    class Meta:
        name = None
        app = None
        id_attribute = 'id'
