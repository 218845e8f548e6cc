from collections import OrderedDict
import logging

from jsonschema import Draft7Validator

from .application import Application
from .exceptions import UnknownAppError, AmbiguousAppError, ConfigurationError, UnknownModelError

logger = logging.getLogger(__name__)

_CREDENTIALS = {
    "type": "array",
    "items": {"type": "string"},
    "minItems": 2,
    "maxItems": 2
}

APPS_SCHEMA = {
    "type": "object",
    "additionalProperties": {
        "anyOf": [
            {"type": "string", "minLength": 1},
            {
                "type": "object",
                "properties": {
                    "url": {"type": "string", "minLength": 1},
                    "basic_auth": _CREDENTIALS,
                    "token": {"type": "string"},
                    "authorization": _CREDENTIALS
                },
                "required": ["url"],
                "additionalProperties": False
            }
        ]
    }
}


def _configurator(options):
    def configure(app):
        app.url = options['url']
        if 'basic_auth' in options:
            app.basic_auth(*options['basic_auth'])
        if 'token' in options:
            app.token_auth(options['token'])
        if 'authorization' in options:
            app.authorization(*options['authorization'])
    return configure


class Registry(object):
    """
    Keeps track of the remote applications and the model classes that fetch from them.

    Models are bound to a registry using :meth:`add_model`, which also works as a class decorator:

    .. code-block:: python

        remote = Registry()
        remote.register('adventure_app', 'localhost:1234')

        @remote.add_model
        class Adventure(Model):
            members = HasMany()

    :param dict apps: an optional mapping of applications, see :meth:`configure`
    """

    def __init__(self, apps=None):
        self.apps = OrderedDict()
        self.models = {}

        if apps:
            self.configure(apps)

    def init_app(self, app):
        """
        Register the applications listed in the ``REMOTELY_APPS`` setting of a host application's ``config``.
        """
        app.config.setdefault('REMOTELY_APPS', {})
        self.configure(app.config['REMOTELY_APPS'])

    def register(self, name, url_or_configurator):
        """
        Register a remote application.

        :param name: unique application name
        :param url_or_configurator: either a base url or a callable that configures the :class:`Application`
        :return: the new :class:`Application`
        """
        if callable(url_or_configurator):
            application = Application(name, configurator=url_or_configurator)
        else:
            application = Application(name, url=url_or_configurator)

        if name in self.apps:
            logger.debug('Replacing application "%s"', name)

        self.apps[name] = application
        return application

    def configure(self, apps):
        """
        Register applications from a mapping of names to either urls or option dictionaries with the keys
        ``url``, ``basic_auth``, ``token`` and ``authorization``.

        :raises ConfigurationError: if the mapping does not validate
        """
        errors = sorted(Draft7Validator(APPS_SCHEMA).iter_errors(apps), key=lambda e: list(e.absolute_path))
        if errors:
            raise ConfigurationError('Invalid application configuration', errors)

        for name, options in apps.items():
            if isinstance(options, dict):
                self.register(name, _configurator(options))
            else:
                self.register(name, options)

    def get(self, name=None):
        """
        Return a registered :class:`Application`. When no name is given and only one application is registered,
        that application is returned.

        :raises UnknownAppError: if the application is not registered
        :raises AmbiguousAppError: if no name is given and more than one application is registered
        """
        if name is None:
            if len(self.apps) == 1:
                return next(iter(self.apps.values()))
            if len(self.apps) > 1:
                raise AmbiguousAppError(self.apps.keys())
            raise UnknownAppError(name)

        try:
            return self.apps[name]
        except KeyError:
            raise UnknownAppError(name)

    def reset(self):
        self.apps.clear()

    def add_model(self, model):
        """
        Bind a model class to this registry.

        :param model: a subclass of :class:`Associations` or :class:`Model`
        :return: the model class
        """
        if self.models.get(model.__name__) is model:
            return model

        if model.__dict__.get('registry') not in (None, self):
            raise RuntimeError('Attempted to add a model that is already bound to a different Registry.')

        if model.__name__ in self.models:
            replaced = self.models[model.__name__]
            logger.warning('Model "%s" from %s replaces the one from %s',
                           model.__name__, model.__module__, replaced.__module__)

        model.registry = self
        self.models[model.__name__] = model
        return model

    def model(self, name):
        try:
            return self.models[name]
        except KeyError:
            raise UnknownModelError(name)
