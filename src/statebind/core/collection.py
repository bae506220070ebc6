"""Ordered, duplicate-free collection of subjects that is itself a subject."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator

from .errors import OutOfRangeError
from .notifications import COLLECTION_ADD, COLLECTION_CLEAR, COLLECTION_REMOVE, SUBJECT_DESTROY
from .subject import Subject

LOGGER = logging.getLogger(__name__)

SortKey = Callable[[Subject], Any]


class Collection(Subject):
    """Ordered set of subjects with membership decided by ``is_equal``.

    Membership changes are published twice: once on the collection (with
    the affected member as argument) and once on the member itself, so a
    member can react to joining or leaving without knowing the collection.

    The collection never destroys its members. When built with
    ``track_destroy=True`` it removes a member as soon as that member is
    destroyed; otherwise destroyed members stay until removed explicitly.

    Args:
        members: Initial members. The sequence is copied but not
            deduplicated.
        sort_key: Optional key function; when given the members are kept
            sorted by it after every insertion.
        track_destroy: Remove members automatically on ``subject:destroy``.
    """

    def __init__(
        self,
        members: Iterable[Subject] | None = None,
        *,
        sort_key: SortKey | None = None,
        track_destroy: bool = False,
    ) -> None:
        super().__init__()
        self._members: list[Subject] = list(members or [])
        self._sort_key = sort_key
        self._track_destroy = track_destroy
        if self._sort_key is not None:
            self._members.sort(key=self._sort_key)
        if self._track_destroy:
            for member in self._members:
                member.subscribe(SUBJECT_DESTROY, self._on_member_destroyed)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def at(self, index: int) -> Subject:
        """Return the member at ``index``.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, size)``.
        """

        if not self.in_range(index):
            raise OutOfRangeError(
                message=f"Collection index {index!r} is out of range for size {self.size()}",
                index=index,
                size=self.size(),
            )
        return self._members[index]

    def get(self, subject: Any) -> Subject | None:
        """Return the first member equal to ``subject``, or None."""

        for member in self._members:
            if member.is_equal(subject):
                return member
        return None

    def get_all(self) -> tuple[Subject, ...]:
        """Return every member, in order."""

        return tuple(self._members)

    def index_of(self, subject: Any) -> int:
        """Return the position of the first member equal to ``subject``, or -1."""

        for index, member in enumerate(self._members):
            if member.is_equal(subject):
                return index
        return -1

    def in_range(self, index: int) -> bool:
        return 0 <= index < len(self._members)

    def size(self) -> int:
        return len(self._members)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add(self, subject: Subject) -> bool:
        """Add ``subject`` unless an equal member is already present.

        Returns:
            True if the subject was added.
        """

        if self.get(subject) is not None:
            return False
        self._members.append(subject)
        if self._sort_key is not None:
            self._members.sort(key=self._sort_key)
        if self._track_destroy:
            subject.subscribe(SUBJECT_DESTROY, self._on_member_destroyed)
        LOGGER.debug("Added %r to collection (size=%d)", subject, len(self._members))
        self.notify(COLLECTION_ADD, subject)
        subject.notify(COLLECTION_ADD)
        return True

    def remove(self, subject: Any) -> Subject | None:
        """Remove the member equal to ``subject`` and return it.

        Returns None, without notifying anyone, when no member matches.
        """

        index = self.index_of(subject)
        if index < 0:
            return None
        entry = self._members.pop(index)
        if self._track_destroy:
            entry.unsubscribe(SUBJECT_DESTROY, self._on_member_destroyed)
        LOGGER.debug("Removed %r from collection (size=%d)", entry, len(self._members))
        entry.notify(COLLECTION_REMOVE)
        self.notify(COLLECTION_REMOVE, entry)
        return entry

    def clear(self) -> None:
        """Remove every member, notifying each of them and then the collection."""

        cleared = self._members
        self._members = []
        LOGGER.debug("Cleared %d member(s) from collection", len(cleared))
        for member in cleared:
            if self._track_destroy:
                member.unsubscribe(SUBJECT_DESTROY, self._on_member_destroyed)
            member.notify(COLLECTION_CLEAR)
        self.notify(COLLECTION_CLEAR)

    def destroy(self) -> None:
        """Stop tracking member destruction, then destroy the collection.

        Members are left intact and stay in the collection.
        """

        if self._track_destroy:
            for member in self._members:
                member.unsubscribe(SUBJECT_DESTROY, self._on_member_destroyed)
            self._track_destroy = False
        super().destroy()

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Subject]:
        return iter(tuple(self._members))

    def __contains__(self, subject: object) -> bool:
        return self.get(subject) is not None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_member_destroyed(self, member: Subject) -> None:
        self.remove(member)


__all__ = ["Collection", "SortKey"]
