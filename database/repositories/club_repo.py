"""CRUD operations for golf.clubs."""

import asyncpg
from typing import List, Optional

from models import Club
from database.converters import club_from_row, club_to_row, parse_uuid
from database.exceptions import IntegrityError


class ClubRepositoryDB:
    """Async CRUD for the clubs in a user's bag."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_club(self, club_id: str) -> Optional[Club]:
        cid = parse_uuid(club_id)
        if cid is None:
            return None
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM golf.clubs WHERE id = $1", cid
            )
            return club_from_row(row) if row else None

    async def get_clubs_for_user(self, user_id: str) -> List[Club]:
        """A user's bag, longest club first."""
        uid = parse_uuid(user_id)
        if uid is None:
            return []
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT * FROM golf.clubs
                   WHERE user_id = $1
                   ORDER BY typical_distance DESC NULLS LAST, name""",
                uid,
            )
            return [club_from_row(r) for r in rows]

    async def create_club(self, club: Club, user_id: str) -> Club:
        uid = parse_uuid(user_id)
        if uid is None:
            raise IntegrityError(f"Invalid user id: {user_id}")
        data = club_to_row(club, uid)
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    """INSERT INTO golf.clubs
                       (user_id, name, brand, model, loft, typical_distance)
                       VALUES ($1, $2, $3, $4, $5, $6)
                       RETURNING *""",
                    data["user_id"], data["name"], data["brand"],
                    data["model"], data["loft"], data["typical_distance"],
                )
                return club_from_row(row)
        except asyncpg.CheckViolationError as e:
            raise IntegrityError(str(e)) from e

    async def update_club(self, club_id: str, **fields) -> Optional[Club]:
        """Update club fields. Returns None when the club does not exist."""
        allowed = {"name", "brand", "model", "loft", "typical_distance"}
        updates = {k: v for k, v in fields.items() if k in allowed}
        if not updates:
            return await self.get_club(club_id)

        cid = parse_uuid(club_id)
        if cid is None:
            return None

        set_clause = ", ".join(f"{k} = ${i+2}" for i, k in enumerate(updates))
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"UPDATE golf.clubs SET {set_clause} WHERE id = $1 RETURNING *",
                    cid, *updates.values(),
                )
                return club_from_row(row) if row else None
        except asyncpg.CheckViolationError as e:
            raise IntegrityError(str(e)) from e

    async def delete_club(self, club_id: str) -> bool:
        """Returns True if a club was deleted."""
        cid = parse_uuid(club_id)
        if cid is None:
            return False
        async with self._pool.acquire() as conn:
            result = await conn.execute(
                "DELETE FROM golf.clubs WHERE id = $1", cid
            )
            return result == "DELETE 1"
