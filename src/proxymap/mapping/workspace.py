"""Interactive editing state: the store plus the currently previewed mapping."""

from enum import Enum
from typing import Optional

from .store import MappingStore
from .validator import DomainMapping
from ..exceptions import NothingSelectedError, ProxymapError
from ..renderer import render_all, render_one


class PreviewPolicy(str, Enum):
    """What a preview shows when no mapping is selected."""

    ALL = "all"
    PLACEHOLDER = "placeholder"


class MappingWorkspace:
    """Tracks a selected mapping and keeps it pointing at the same rule while the store changes."""

    def __init__(self, store: Optional[MappingStore] = None, policy: PreviewPolicy = PreviewPolicy.ALL, clipboard=None):
        self.store = store if store is not None else MappingStore()
        self.policy = PreviewPolicy(policy)
        self.clipboard = clipboard
        self._selected: Optional[int] = None

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    @property
    def selected_mapping(self) -> Optional[DomainMapping]:
        if self._selected is None:
            return None
        return self.store[self._selected]

    def select(self, position: int) -> DomainMapping:
        mapping = self.store[position]
        self._selected = position
        return mapping

    def clear_selection(self) -> None:
        self._selected = None

    def add(self, source: str, proxy: str) -> DomainMapping:
        return self.store.add(source, proxy)

    def replace(self, position: int, source: str, proxy: str) -> DomainMapping:
        return self.store.replace(position, source, proxy)

    def remove(self, position: int) -> DomainMapping:
        removed = self.store.remove(position)
        if self._selected is not None:
            if position == self._selected:
                self._selected = None
            elif position < self._selected:
                self._selected -= 1
        return removed

    def move_up(self, position: int) -> bool:
        moved = self.store.move_up(position)
        if moved:
            self._track_swap(position - 1, position)
        return moved

    def move_down(self, position: int) -> bool:
        moved = self.store.move_down(position)
        if moved:
            self._track_swap(position, position + 1)
        return moved

    def preview(self) -> str:
        """Render the selected mapping, or fall back according to the policy."""
        mapping = self.selected_mapping
        if mapping is not None:
            return render_one(mapping)
        if self.policy is PreviewPolicy.PLACEHOLDER:
            raise NothingSelectedError("No mapping selected; select one to preview its configuration")
        return render_all(self.store.list_mappings())

    def render_all(self) -> str:
        return render_all(self.store.list_mappings())

    def copy_mapping(self, position: int) -> str:
        """Copy one mapping's configuration to the clipboard and return it."""
        text = render_one(self.store[position])
        self._copy(text)
        return text

    def copy_all(self) -> str:
        """Copy every mapping's configuration to the clipboard and return it."""
        if not len(self.store):
            raise ProxymapError("There is no configuration to copy yet")
        text = self.render_all()
        self._copy(text)
        return text

    def copy_preview(self) -> str:
        if not len(self.store):
            raise ProxymapError("There is no configuration to copy yet")
        text = self.preview()
        self._copy(text)
        return text

    def _copy(self, text: str) -> None:
        if self.clipboard is None:
            raise ProxymapError("No clipboard configured for this workspace")
        self.clipboard.copy(text)

    def _track_swap(self, first: int, second: int) -> None:
        if self._selected == first:
            self._selected = second
        elif self._selected == second:
            self._selected = first
