import re

from .exceptions import HasManyForeignKeyError, MissingAttributeError
from .url import URL
from .utils import pluralize

_TOKEN = re.compile(r':([A-Za-z_]\w*)')


def attribute_value(instance, name):
    """
    Read a public attribute of an instance for use in a path. Stored attributes of a :class:`Model` take
    precedence over members of its class.

    :raises MissingAttributeError: if the attribute is private, absent, ``None`` or a method
    """
    if name.startswith('_'):
        raise MissingAttributeError(instance, name)

    try:
        value = instance.remote_attribute(name)
    except AttributeError:
        raise MissingAttributeError(instance, name)

    if value is None or callable(value):
        raise MissingAttributeError(instance, name)
    return value


def interpolate(instance, path):
    """
    Replace every ``:name`` token in ``path`` with the value of the instance attribute ``name``.
    """
    return URL(_TOKEN.sub(lambda match: str(attribute_value(instance, match.group(1))), str(path)))


def base_resource_name(instance):
    """
    The plural element name of the class that directly extends :class:`Model` or :class:`Associations`, so that
    subclasses share the resource family of their base class.
    """
    return pluralize(type(instance).base_class().meta.name)


def instance_id(instance):
    return attribute_value(instance, type(instance).meta.id_attribute or 'id')


def resolve_path(instance, association):
    """
    Build the request path of an association for an instance.

    An explicit ``path`` (a template string or a callable taking the instance) takes precedence over the
    conventions of the association's cardinality.

    :raises HasManyForeignKeyError: if ``foreign_key`` is set on an association that does not support it
    :raises MissingAttributeError: if an interpolated attribute has no value
    """
    if association.foreign_key is not None and not association.supports_foreign_key:
        raise HasManyForeignKeyError(association)

    path = association.path
    if callable(path):
        path = path(instance)

    if path is not None:
        return interpolate(instance, path)

    return association.default_path(instance)
