"""Supabase-backed outfit repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fit_forecast.adapters.supabase_errors import execute
from fit_forecast.domain.errors import PersistenceFailure
from fit_forecast.domain.outfits import Outfit
from fit_forecast.services.outfits import OutfitRepository


@dataclass
class SupabaseOutfitRepository(OutfitRepository):
    """Supabase implementation for saved outfits."""

    client: Client

    def list_outfits(self) -> list[Outfit]:
        """Return outfits ordered by creation time."""
        response = execute(
            self.client.table("outfits")
            .select("id, name, description, image_name, location")
            .order("created_at")
        )
        return [
            Outfit(
                id=UUID(row["id"]),
                name=row["name"],
                description=row.get("description") or "",
                image_name=row.get("image_name") or "",
                location=row.get("location") or "",
            )
            for row in response.data or []
        ]

    def create_outfit(self, outfit: Outfit) -> None:
        """Insert an outfit row."""
        response = execute(
            self.client.table("outfits").insert(
                {
                    "id": str(outfit.id),
                    "name": outfit.name,
                    "description": outfit.description,
                    "image_name": outfit.image_name,
                    "location": outfit.location,
                }
            )
        )
        if not response.data:
            raise PersistenceFailure("Failed to save outfit")

    def delete_outfit(self, outfit_id: UUID) -> None:
        """Delete an outfit row by id."""
        execute(self.client.table("outfits").delete().eq("id", str(outfit_id)))
