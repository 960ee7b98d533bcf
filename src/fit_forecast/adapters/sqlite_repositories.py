"""Local SQLite repositories for outfits, preferences and settings."""

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from uuid import UUID

from fit_forecast.domain.errors import PersistenceFailure
from fit_forecast.domain.outfits import Outfit
from fit_forecast.domain.preferences import PREFERENCES_ID, UserPreferences
from fit_forecast.services.app_settings import SettingsRepository
from fit_forecast.services.outfits import OutfitRepository
from fit_forecast.services.preferences import PreferencesRepository

_SCHEMA = """
CREATE TABLE IF NOT EXISTS outfits (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL,
    image_name TEXT NOT NULL,
    location TEXT NOT NULL DEFAULT '',
    created_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS user_preferences (
    id TEXT PRIMARY KEY,
    weather_sensitivity REAL NOT NULL,
    prefers_casual INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS app_settings (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class SqliteDatabase:
    """Connection factory for the local database file."""

    def __init__(self, database_path: str | Path) -> None:
        self.database_path = Path(database_path)
        try:
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
            with self.connect() as conn:
                conn.executescript(_SCHEMA)
        except (OSError, PersistenceFailure) as exc:
            raise PersistenceFailure(
                f"Could not open database at {self.database_path}"
            ) from exc

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection that commits on success and always closes."""
        try:
            conn = sqlite3.connect(self.database_path)
        except sqlite3.Error as exc:
            raise PersistenceFailure() from exc
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        except sqlite3.Error as exc:
            raise PersistenceFailure() from exc
        finally:
            conn.close()


@dataclass
class SqliteOutfitRepository(OutfitRepository):
    """SQLite implementation for saved outfits."""

    database: SqliteDatabase

    def list_outfits(self) -> list[Outfit]:
        """Return outfits in the order they were saved."""
        with self.database.connect() as conn:
            rows = conn.execute(
                "SELECT id, name, description, image_name, location "
                "FROM outfits ORDER BY created_at, rowid"
            ).fetchall()
        return [_row_to_outfit(row) for row in rows]

    def create_outfit(self, outfit: Outfit) -> None:
        """Insert an outfit row."""
        with self.database.connect() as conn:
            conn.execute(
                "INSERT INTO outfits (id, name, description, image_name, location, "
                "created_at) VALUES (?, ?, ?, ?, ?, ?)",
                (
                    str(outfit.id),
                    outfit.name,
                    outfit.description,
                    outfit.image_name,
                    outfit.location,
                    datetime.now(tz=UTC).isoformat(),
                ),
            )

    def delete_outfit(self, outfit_id: UUID) -> None:
        """Delete an outfit row if it exists."""
        with self.database.connect() as conn:
            conn.execute("DELETE FROM outfits WHERE id = ?", (str(outfit_id),))


@dataclass
class SqlitePreferencesRepository(PreferencesRepository):
    """SQLite implementation for the preferences record."""

    database: SqliteDatabase

    def get_preferences(self) -> UserPreferences | None:
        """Return the stored preferences row."""
        with self.database.connect() as conn:
            row = conn.execute(
                "SELECT weather_sensitivity, prefers_casual FROM user_preferences "
                "WHERE id = ?",
                (PREFERENCES_ID,),
            ).fetchone()
        if row is None:
            return None
        return UserPreferences(
            weather_sensitivity=row["weather_sensitivity"],
            prefers_casual=bool(row["prefers_casual"]),
        )

    def upsert_preferences(self, preferences: UserPreferences) -> None:
        """Write the single preferences row."""
        with self.database.connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO user_preferences "
                "(id, weather_sensitivity, prefers_casual) VALUES (?, ?, ?)",
                (
                    PREFERENCES_ID,
                    preferences.weather_sensitivity,
                    int(preferences.prefers_casual),
                ),
            )

    def count(self) -> int:
        """Return the number of stored preference rows."""
        with self.database.connect() as conn:
            row = conn.execute("SELECT COUNT(*) FROM user_preferences").fetchone()
        return int(row[0])


@dataclass
class SqliteSettingsRepository(SettingsRepository):
    """SQLite implementation for key-value settings."""

    database: SqliteDatabase

    def get_value(self, key: str) -> str | None:
        """Return the value stored for a key."""
        with self.database.connect() as conn:
            row = conn.execute(
                "SELECT value FROM app_settings WHERE key = ?", (key,)
            ).fetchone()
        return row["value"] if row else None

    def set_value(self, key: str, value: str) -> None:
        """Store a value for a key."""
        with self.database.connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO app_settings (key, value) VALUES (?, ?)",
                (key, value),
            )


def _row_to_outfit(row: sqlite3.Row) -> Outfit:
    return Outfit(
        id=UUID(row["id"]),
        name=row["name"],
        description=row["description"],
        image_name=row["image_name"],
        location=row["location"],
    )
