class RemotelyError(Exception):
    """
    Base class for configuration and programmer errors. Failing remote requests are never raised; they are
    reported as ``False``.
    """

    def as_dict(self):
        return {
            'error': self.__class__.__name__,
            'message': str(self)
        }


class UnknownAppError(RemotelyError, KeyError):

    def __init__(self, name):
        super(UnknownAppError, self).__init__(name)
        self.name = name

    def __str__(self):
        if self.name is None:
            return 'No application is registered.'
        return 'No application named "{}" is registered.'.format(self.name)

    def as_dict(self):
        dct = super(UnknownAppError, self).as_dict()
        dct['app'] = self.name
        return dct


class AmbiguousAppError(RemotelyError):

    def __init__(self, names):
        super(AmbiguousAppError, self).__init__(
            'More than one application is registered ({}); specify which one to use.'.format(
                ', '.join(sorted(str(name) for name in names))))
        self.names = tuple(names)


class MissingAttributeError(RemotelyError, AttributeError):

    def __init__(self, instance, attribute):
        name = instance.__name__ if isinstance(instance, type) else instance.__class__.__name__
        super(MissingAttributeError, self).__init__('{} has no value for "{}"'.format(name, attribute))
        self.attribute = attribute

    def as_dict(self):
        dct = super(MissingAttributeError, self).as_dict()
        dct['attribute'] = self.attribute
        return dct


class HasManyForeignKeyError(RemotelyError):

    def __init__(self, association):
        super(HasManyForeignKeyError, self).__init__(
            '"{}" is a {} association; foreign_key is only supported by BelongsTo.'.format(
                association.name, association.__class__.__name__))
        self.association = association


class NonJsonResponseError(RemotelyError):

    def __init__(self, body):
        super(NonJsonResponseError, self).__init__('Expected a JSON response, got an HTML document.')
        self.body = body

    def as_dict(self):
        dct = super(NonJsonResponseError, self).as_dict()
        dct['body'] = self.body
        return dct


class ConfigurationError(RemotelyError):

    def __init__(self, message, errors=()):
        super(ConfigurationError, self).__init__(message)
        self.errors = list(errors)

    def _format_errors(self):
        for error in self.errors:
            yield {
                'validationOf': {error.validator: error.validator_value},
                'path': tuple(error.absolute_path),
                'message': error.message
            }

    def as_dict(self):
        dct = super(ConfigurationError, self).as_dict()
        dct['errors'] = list(self._format_errors())
        return dct


class UnboundModelError(RemotelyError):

    def __init__(self, model):
        super(UnboundModelError, self).__init__(
            '"{}" is not bound to a Registry; use Registry.add_model() first.'.format(model.__name__))
        self.model = model


class UnknownModelError(RemotelyError, LookupError):

    def __init__(self, name):
        super(UnknownModelError, self).__init__('Model named "{}" cannot be found.'.format(name))
        self.name = name
