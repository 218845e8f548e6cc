"""
Links loaded objects to other top-level resources by attribute naming convention.

Every ``<name>_id`` attribute of a :class:`Model` instance makes ``<name>`` callable on the instance. The call
finds the object with that id on the class named after ``<name>`` (``user_id`` links to ``User.find(user_id)``)
and caches it until it is called with ``reload=True``.

This is independent of declared associations: nothing is registered, the path is always the ``find`` path of the
target class, and no fetch happens before the first call.
"""
from .cache import cache_for
from .reference import ModelReference
from .utils import classify

SUFFIX = '_id'


def link_name(attribute):
    """
    The name of the link derived from an attribute, or ``None`` if the attribute does not end in ``_id``.
    """
    if attribute.endswith(SUFFIX) and len(attribute) > len(SUFFIX):
        return attribute[:-len(SUFFIX)]
    return None


def link_names(attributes):
    return [name for name in (link_name(attribute) for attribute in attributes) if name is not None]


def autolink(instance, name):
    """
    Return the :class:`AutoLink` called ``name`` on an instance, or ``None`` if the instance has no
    ``<name>_id`` attribute.
    """
    attribute = name + SUFFIX
    if name and attribute in instance.attributes:
        return AutoLink(instance, name, attribute)
    return None


class AutoLink(object):

    def __init__(self, instance, name, attribute):
        self.instance = instance
        self.name = name
        self.attribute = attribute

    def target_class(self):
        return ModelReference(classify(self.name)).resolve(type(self.instance))

    def fetch(self):
        return self.target_class().find(self.instance.get_attribute(self.attribute))

    def __call__(self, reload=False):
        # keyed by the attribute so declared associations of the same name keep their own entry
        return cache_for(self.instance).get(self.attribute, self.fetch, reload=reload)

    def __repr__(self):
        return '<AutoLink {}.{}>'.format(self.instance.__class__.__name__, self.name)
