from importlib import import_module
import inspect

from .exceptions import UnknownModelError


class ModelReference(object):
    """
    A reference to a model class: the class itself, ``'self'``, the name of a class bound to the same
    :class:`Registry`, or a ``'module.ClassName'`` path.
    """

    def __init__(self, value):
        self.value = value

    def resolve(self, binding=None):
        """
        Attempt to resolve the reference value and return the matching model class.

        :param binding: the model class the reference is declared on
        """
        name = self.value

        if name == 'self':
            return binding

        if inspect.isclass(name):
            return name

        registry = getattr(binding, 'registry', None)
        if registry is not None and name in registry.models:
            return registry.models[name]

        if '.' in name:
            module_name, class_name = name.rsplit('.', 1)
            try:
                return getattr(import_module(module_name), class_name)
            except (ImportError, AttributeError):
                pass

        raise UnknownModelError(name)

    def __repr__(self):
        return "<ModelReference '{}'>".format(self.value)
