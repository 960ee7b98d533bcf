"""Saved outfit management."""

import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from fit_forecast.domain.outfits import Outfit

_logger = logging.getLogger(__name__)


class OutfitRepository(Protocol):
    """Persistence interface for saved outfits.

    Implementations raise ``PersistenceFailure`` when the backing store fails.
    """

    def list_outfits(self) -> list[Outfit]:
        """Return all outfits in creation order."""

    def create_outfit(self, outfit: Outfit) -> None:
        """Insert a new outfit row."""

    def delete_outfit(self, outfit_id: UUID) -> None:
        """Delete an outfit; unknown ids are ignored."""


@dataclass
class OutfitStore:
    """Saved outfits with an in-memory snapshot of the last load.

    Duplicate detection only looks at the snapshot, so callers that care
    about accuracy should ``refresh()`` first. Failed writes leave the
    snapshot as it was.
    """

    repository: OutfitRepository
    _snapshot: list[Outfit] = field(default_factory=list, init=False)

    def refresh(self) -> list[Outfit]:
        """Reload outfits from the repository."""
        self._snapshot = self.repository.list_outfits()
        return self.list()

    def list(self) -> list[Outfit]:
        """Return the last loaded outfits."""
        return list(self._snapshot)

    def is_duplicate(self, outfit: Outfit) -> bool:
        """Return True when a loaded outfit has the same name and location."""
        return any(existing.same_as(outfit) for existing in self._snapshot)

    def save(self, outfit: Outfit) -> None:
        """Insert the outfit, even if it duplicates an existing one."""
        self.repository.create_outfit(outfit)
        _logger.info("Saved outfit %s (%s)", outfit.id, outfit.name)
        self.refresh()

    def remove(self, outfit_id: UUID) -> None:
        """Delete an outfit by id; missing ids are a no-op."""
        self.repository.delete_outfit(outfit_id)
        self.refresh()
