"""Ordered store of domain mappings."""

from typing import Iterator, List, Tuple

from .validator import DomainMapping, validate_mapping
from ..exceptions import MappingRangeError


class MappingStore:
    """Holds domain mappings in display order, unique by source domain."""

    def __init__(self):
        self._mappings: List[DomainMapping] = []

    def __len__(self) -> int:
        return len(self._mappings)

    def __iter__(self) -> Iterator[DomainMapping]:
        return iter(tuple(self._mappings))

    def __getitem__(self, position: int) -> DomainMapping:
        self._check_position(position)
        return self._mappings[position]

    def list_mappings(self) -> Tuple[DomainMapping, ...]:
        """Return a read-only snapshot of the mappings in order."""
        return tuple(self._mappings)

    def sources(self) -> List[str]:
        return [mapping.source for mapping in self._mappings]

    def add(self, source: str, proxy: str) -> DomainMapping:
        """Validate a pair and append it to the end of the store."""
        mapping = validate_mapping(source, proxy, self.sources())
        self._mappings.append(mapping)
        return mapping

    def replace(self, position: int, source: str, proxy: str) -> DomainMapping:
        """Edit the mapping at ``position`` in place."""
        self._check_position(position)
        others = [m.source for i, m in enumerate(self._mappings) if i != position]
        mapping = validate_mapping(source, proxy, others)
        self._mappings[position] = mapping
        return mapping

    def remove(self, position: int) -> DomainMapping:
        """Delete and return the mapping at ``position``."""
        self._check_position(position)
        return self._mappings.pop(position)

    def move_up(self, position: int) -> bool:
        """Swap the mapping at ``position`` with the one before it.

        Returns False (and leaves the store alone) for the first mapping.
        """
        self._check_position(position)
        if position == 0:
            return False
        self._swap(position - 1, position)
        return True

    def move_down(self, position: int) -> bool:
        """Swap the mapping at ``position`` with the one after it.

        Returns False (and leaves the store alone) for the last mapping.
        """
        self._check_position(position)
        if position == len(self._mappings) - 1:
            return False
        self._swap(position, position + 1)
        return True

    def _swap(self, first: int, second: int) -> None:
        items = self._mappings
        items[first], items[second] = items[second], items[first]

    def _check_position(self, position: int) -> None:
        # Negative indices and bools are rejected rather than treated as list indices.
        if (not isinstance(position, int) or isinstance(position, bool)
                or not 0 <= position < len(self._mappings)):
            raise MappingRangeError(
                f"No mapping at position {position} (store has {len(self._mappings)})",
                position=position,
            )
