# File: tutorrec/models/person_list.py

from difflib import SequenceMatcher
from typing import Iterable, Iterator, List, Optional, Tuple

from tutorrec.core.config_manager import Config
from tutorrec.utils.logger import setup_logger
from .exceptions import DuplicatePersonError, PersonNotFoundError
from .person import Person, normalize_name

logger = setup_logger(__name__)


class UniquePersonList:
    """List of persons with no two sharing an identity (see Person.is_same_person)."""

    def __init__(self):
        self._internal_list: List[Person] = []

    def contains(self, person: Person) -> bool:
        """Returns true if a person with the same identity is in the list."""
        return any(existing.is_same_person(person) for existing in self._internal_list)

    def _index_of(self, person: Person) -> Optional[int]:
        for index, existing in enumerate(self._internal_list):
            if existing.is_same_person(person):
                return index
        return None

    def add(self, person: Person) -> None:
        """Add a person. The person must not already exist in the list."""
        if self.contains(person):
            raise DuplicatePersonError(person)
        self._internal_list.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """
        Replace `target` with `edited`.

        `edited` may keep the target's identity but must not take the identity
        of another person in the list.
        """
        index = self._index_of(target)
        if index is None:
            raise PersonNotFoundError(target)

        if not target.is_same_person(edited) and self.contains(edited):
            raise DuplicatePersonError(edited)

        self._internal_list[index] = edited

    def remove(self, person: Person) -> None:
        """Remove the person with the same identity."""
        index = self._index_of(person)
        if index is None:
            raise PersonNotFoundError(person)
        del self._internal_list[index]

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace the contents. `persons` must not contain duplicates."""
        replacement = list(persons)
        for i, person in enumerate(replacement):
            for other in replacement[i + 1:]:
                if person.is_same_person(other):
                    raise DuplicatePersonError(other)
        self._internal_list = replacement

    def find_near_duplicates(self, person: Person, threshold: Optional[float] = None) -> List[str]:
        """
        Names in the list that look like `person`'s name without being the same person.

        Args:
            person: Person whose name is compared
            threshold: Minimum similarity ratio (default: Config.NEAR_DUPLICATE_THRESHOLD)

        Returns:
            Matching names, most similar first
        """
        if threshold is None:
            threshold = Config.NEAR_DUPLICATE_THRESHOLD

        target = normalize_name(person.name)
        scored = []
        for existing in self._internal_list:
            if existing.is_same_person(person):
                continue
            ratio = SequenceMatcher(None, target, normalize_name(existing.name)).ratio()
            if ratio >= threshold:
                scored.append((ratio, existing.name))

        scored.sort(key=lambda item: item[0], reverse=True)
        if scored:
            logger.debug(f"Found {len(scored)} near duplicates of '{person.name}'")
        return [name for _, name in scored]

    def as_unmodifiable_list(self) -> Tuple[Person, ...]:
        return tuple(self._internal_list)

    def __contains__(self, person: object) -> bool:
        return isinstance(person, Person) and self.contains(person)

    def __iter__(self) -> Iterator[Person]:
        return iter(tuple(self._internal_list))

    def __len__(self) -> int:
        return len(self._internal_list)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, UniquePersonList):
            return NotImplemented
        return self._internal_list == other._internal_list

    __hash__ = None
