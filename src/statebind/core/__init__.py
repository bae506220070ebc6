"""Core observable layer.

Subjects, the dirty-tracked property store and collections. This layer has
no dependency on Qt or on any transport.
"""

from .collection import Collection
from .errors import (
    DrawNotImplementedError,
    ErrorCode,
    FieldEventError,
    MisconfiguredCollaboratorError,
    OutOfRangeError,
    RequestConfigError,
    StatebindError,
)
from .modifiable import KeyedSubject, ModifiableSubject
from .notifications import (
    COLLECTION_ADD,
    COLLECTION_CLEAR,
    COLLECTION_REMOVE,
    SUBJECT_CHANGE_PREFIX,
    SUBJECT_CLEAN,
    SUBJECT_DESTROY,
    SUBJECT_DIRTY,
    change_notification,
    is_quiet,
    mark_quiet,
    quiet_prefixes,
    set_quiet,
    unmark_quiet,
)
from .subject import Equatable, Observer, Subject

__all__ = [
    "Subject",
    "Equatable",
    "Observer",
    "ModifiableSubject",
    "KeyedSubject",
    "Collection",
    # Errors
    "ErrorCode",
    "StatebindError",
    "OutOfRangeError",
    "DrawNotImplementedError",
    "FieldEventError",
    "MisconfiguredCollaboratorError",
    "RequestConfigError",
    # Notifications
    "SUBJECT_DESTROY",
    "SUBJECT_DIRTY",
    "SUBJECT_CLEAN",
    "SUBJECT_CHANGE_PREFIX",
    "COLLECTION_ADD",
    "COLLECTION_REMOVE",
    "COLLECTION_CLEAR",
    "change_notification",
    "mark_quiet",
    "unmark_quiet",
    "set_quiet",
    "quiet_prefixes",
    "is_quiet",
]
