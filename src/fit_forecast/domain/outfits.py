"""Domain models for saved outfits."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Outfit:
    """Outfit the user chose to keep."""

    name: str
    description: str
    image_name: str
    location: str = ""
    id: UUID = field(default_factory=uuid4)

    def same_as(self, other: "Outfit") -> bool:
        """Return True when both outfits share a name and location."""
        return self.name == other.name and self.location == other.location
