from .associations import Associations, Association, HasMany, HasOne, BelongsTo, define_association
from .application import Application, Connection
from .collection import Collection
from .exceptions import RemotelyError, UnknownAppError, AmbiguousAppError, MissingAttributeError, \
    HasManyForeignKeyError, NonJsonResponseError, ConfigurationError, UnboundModelError, UnknownModelError
from .model import Model
from .registry import Registry
from .url import URL

__all__ = (
    'Registry',
    'Application',
    'Connection',
    'Associations',
    'Association',
    'HasMany',
    'HasOne',
    'BelongsTo',
    'define_association',
    'Model',
    'Collection',
    'URL',
    'RemotelyError',
    'UnknownAppError',
    'AmbiguousAppError',
    'MissingAttributeError',
    'HasManyForeignKeyError',
    'NonJsonResponseError',
    'ConfigurationError',
    'UnboundModelError',
    'UnknownModelError',
)
