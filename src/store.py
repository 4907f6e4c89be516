"""Person storage with indexes that stay valid across removals."""

import logging
from collections.abc import Iterator

from models import FreeSlot, Person

logger = logging.getLogger("famgrid.store")


class StoreError(Exception):
    """Base class for violations of the store's contract."""


class UnknownPersonError(StoreError, IndexError):
    def __init__(self, person_id: int):
        super().__init__(f"Person ID {person_id} was never issued by this store")
        self.person_id = person_id


class RemovedPersonError(StoreError, KeyError):
    def __init__(self, person_id: int):
        super().__init__(f"Person ID {person_id} has been removed")
        self.person_id = person_id

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return str(self.args[0])


class CapacityError(StoreError):
    def __init__(self, capacity: int):
        super().__init__(f"Person store is full (capacity {capacity})")
        self.capacity = capacity


class PersonInUseError(StoreError):
    """Raised when adding a person that already has an ID or relations."""

    def __init__(self, person: Person):
        super().__init__(
            f"{person.name} already has ID {person.id} or relations; add a new Person"
        )
        self.person = person


class PersonStore:
    """
    Growable list of persons whose indexes never move.

    Removed slots are kept as FreeSlot entries chained into a free list
    (most recently freed first). `add` recycles the head of that chain
    before appending, so an index is only reissued after its person has
    been removed.

    Args:
        capacity: Maximum number of slots, or None to grow without bound
    """

    def __init__(self, capacity: int | None = None):
        if capacity is not None and capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots: list[Person | FreeSlot] = []
        self._free_head: int | None = None
        self._active = 0

    def add(self, person: Person) -> int:
        """
        Store `person` and return its stable ID.

        `person` must be fresh: never added before (its `id` is None) and
        without relations. A Person returned by `remove` cannot be re-added.
        """
        if person.id is not None or person.rels:
            raise PersonInUseError(person)

        if self._free_head is not None:
            idx = self._free_head
            slot = self._slots[idx]
            if not isinstance(slot, FreeSlot):
                raise StoreError(f"Free list is corrupt: slot {idx} is in use")
            self._free_head = slot.next_free
            self._slots[idx] = person
            logger.debug("reused slot %d for %s", idx, person.name)
        else:
            if self.capacity is not None and len(self._slots) >= self.capacity:
                raise CapacityError(self.capacity)
            idx = len(self._slots)
            self._slots.append(person)
            logger.debug("appended slot %d for %s", idx, person.name)

        person.id = idx
        self._active += 1
        return idx

    def remove(self, person_id: int) -> Person:
        """
        Free the slot at `person_id` and return the person that held it.

        Relations held by other persons are not touched; call
        `graph.detach` first if the person is still related to anyone.
        """
        person = self.get(person_id)
        self._slots[person_id] = FreeSlot(next_free=self._free_head)
        self._free_head = person_id
        self._active -= 1
        logger.debug("removed slot %d (%s)", person_id, person.name)
        return person

    def get(self, person_id: int) -> Person:
        if not 0 <= person_id < len(self._slots):
            raise UnknownPersonError(person_id)
        slot = self._slots[person_id]
        if isinstance(slot, FreeSlot):
            raise RemovedPersonError(person_id)
        return slot

    def get_unchecked(self, person_id: int) -> Person:
        """Look up a person without range or removal checks."""
        return self._slots[person_id]  # type: ignore[return-value]

    def is_active(self, person_id: int) -> bool:
        return 0 <= person_id < len(self._slots) and isinstance(
            self._slots[person_id], Person
        )

    def ids(self) -> list[int]:
        """IDs of all active persons in slot order."""
        return [i for i, slot in enumerate(self._slots) if isinstance(slot, Person)]

    @property
    def free_count(self) -> int:
        return len(self._slots) - self._active

    def __len__(self) -> int:
        return self._active

    def __iter__(self) -> Iterator[Person]:
        for slot in self._slots:
            if isinstance(slot, Person):
                yield slot

    def __contains__(self, person_id: object) -> bool:
        return isinstance(person_id, int) and self.is_active(person_id)
