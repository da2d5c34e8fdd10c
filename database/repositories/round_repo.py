"""CRUD operations for golf.rounds."""

import asyncpg
from typing import List, Optional

from models import Round
from database.converters import (
    hole_records_to_json,
    parse_uuid,
    round_from_row,
    round_to_row,
)
from database.exceptions import IntegrityError


class RoundRepositoryDB:
    """Async CRUD for a user's logged rounds."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def get_round(self, round_id: str) -> Optional[Round]:
        rid = parse_uuid(round_id)
        if rid is None:
            return None
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM golf.rounds WHERE id = $1", rid
            )
            return round_from_row(row) if row else None

    async def get_rounds_for_user(
        self, user_id: str, *, limit: int = 20, offset: int = 0
    ) -> List[Round]:
        """A user's rounds, most recent first."""
        uid = parse_uuid(user_id)
        if uid is None:
            return []
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT * FROM golf.rounds
                   WHERE user_id = $1
                   ORDER BY round_date DESC NULLS LAST, created_at DESC
                   LIMIT $2 OFFSET $3""",
                uid, limit, offset,
            )
            return [round_from_row(r) for r in rows]

    # ================================================================
    # Create
    # ================================================================

    async def create_round(self, round_: Round, user_id: str) -> Round:
        """Insert a round. Returns it with the DB-generated id."""
        uid = parse_uuid(user_id)
        if uid is None:
            raise IntegrityError(f"Invalid user id: {user_id}")
        data = round_to_row(round_, uid)
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    """INSERT INTO golf.rounds
                       (user_id, course_name, score, fairways_hit,
                        greens_in_regulation, putts, round_date,
                        tee_position, hole_by_hole_data)
                       VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
                       RETURNING *""",
                    data["user_id"], data["course_name"], data["score"],
                    data["fairways_hit"], data["greens_in_regulation"],
                    data["putts"], data["round_date"], data["tee_position"],
                    data["hole_by_hole_data"],
                )
                return round_from_row(row)
        except asyncpg.CheckViolationError as e:
            raise IntegrityError(str(e)) from e

    # ================================================================
    # Update
    # ================================================================

    async def update_round(self, round_id: str, **fields) -> Optional[Round]:
        """Update round fields. Returns None when the round does not exist."""
        allowed = {
            "course_name", "score", "fairways_hit", "greens_in_regulation",
            "putts", "round_date", "tee_position", "hole_by_hole_data",
        }
        updates = {k: v for k, v in fields.items() if k in allowed}
        if not updates:
            return await self.get_round(round_id)

        rid = parse_uuid(round_id)
        if rid is None:
            return None

        if "hole_by_hole_data" in updates:
            updates["hole_by_hole_data"] = hole_records_to_json(updates["hole_by_hole_data"])

        set_clause = ", ".join(f"{k} = ${i+2}" for i, k in enumerate(updates))
        values = [rid] + list(updates.values())

        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"UPDATE golf.rounds SET {set_clause} WHERE id = $1 RETURNING *",
                    *values,
                )
                return round_from_row(row) if row else None
        except asyncpg.CheckViolationError as e:
            raise IntegrityError(str(e)) from e

    # ================================================================
    # Delete
    # ================================================================

    async def delete_round(self, round_id: str) -> bool:
        """Returns True if a round was deleted."""
        rid = parse_uuid(round_id)
        if rid is None:
            return False
        async with self._pool.acquire() as conn:
            result = await conn.execute(
                "DELETE FROM golf.rounds WHERE id = $1", rid
            )
            return result == "DELETE 1"
