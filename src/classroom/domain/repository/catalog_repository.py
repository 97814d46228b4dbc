"""Abstract repository for the pizza catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is addressed by position: each menu row is
identified by its index, nothing else.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from classroom.domain.model.pizza import Pizza


class CatalogRepository(ABC):

    @abstractmethod
    def get_by_index(self, index: int) -> Pizza | None:
        """Return the pizza on menu row *index*, or None if there is no such row."""

    @abstractmethod
    def get_by_name(self, name: str) -> int | None:
        """Return the menu row of the pizza called *name* (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Pizza]:
        """Return every pizza in menu order."""
