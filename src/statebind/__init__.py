"""statebind: subjects, collections and views that keep UIs in sync.

Mutable domain objects publish named notifications, collections re-publish
membership changes, and views subscribe to their subject for exactly their
own lifetime, tearing down when the subject is destroyed.
"""

from .controllers import Controller, RequestController, SingleRequestController
from .core import (
    Collection,
    DrawNotImplementedError,
    Equatable,
    FieldEventError,
    KeyedSubject,
    MisconfiguredCollaboratorError,
    ModifiableSubject,
    OutOfRangeError,
    RequestConfigError,
    StatebindError,
    Subject,
)
from .views import ActionView, View

__version__ = "2.0.0"

__all__ = [
    "__version__",
    # Core
    "Subject",
    "Equatable",
    "ModifiableSubject",
    "KeyedSubject",
    "Collection",
    # Views
    "View",
    "ActionView",
    # Controllers
    "Controller",
    "RequestController",
    "SingleRequestController",
    # Errors
    "StatebindError",
    "OutOfRangeError",
    "DrawNotImplementedError",
    "FieldEventError",
    "MisconfiguredCollaboratorError",
    "RequestConfigError",
]
