"""Storage for the single persona kept per user."""

import asyncpg
from typing import Optional

from models import Persona
from database.converters import parse_uuid, persona_from_row, persona_to_row
from database.exceptions import IntegrityError


class PersonaRepositoryDB:
    """Async access to golf.personas (unique on user_id)."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_persona(self, user_id: str) -> Optional[Persona]:
        uid = parse_uuid(user_id)
        if uid is None:
            return None
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM golf.personas WHERE user_id = $1", uid
            )
            return persona_from_row(row) if row else None

    async def upsert_persona(self, persona: Persona) -> Persona:
        """Insert the user's persona or overwrite every field of the existing one.

        A single statement, so concurrent generations for one user cannot
        leave two rows behind.
        """
        if parse_uuid(persona.user_id) is None:
            raise IntegrityError(f"Invalid user id: {persona.user_id}")
        data = persona_to_row(persona)
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                """INSERT INTO golf.personas
                   (user_id, persona_name, strengths, weaknesses, recommendations,
                    play_style, mental_game, practice_focus, source)
                   VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
                   ON CONFLICT (user_id)
                   DO UPDATE SET persona_name = EXCLUDED.persona_name,
                                 strengths = EXCLUDED.strengths,
                                 weaknesses = EXCLUDED.weaknesses,
                                 recommendations = EXCLUDED.recommendations,
                                 play_style = EXCLUDED.play_style,
                                 mental_game = EXCLUDED.mental_game,
                                 practice_focus = EXCLUDED.practice_focus,
                                 source = EXCLUDED.source,
                                 updated_at = NOW()
                   RETURNING *""",
                data["user_id"], data["persona_name"], data["strengths"],
                data["weaknesses"], data["recommendations"], data["play_style"],
                data["mental_game"], data["practice_focus"], data["source"],
            )
            return persona_from_row(row)

    async def delete_persona(self, user_id: str) -> bool:
        uid = parse_uuid(user_id)
        if uid is None:
            return False
        async with self._pool.acquire() as conn:
            result = await conn.execute(
                "DELETE FROM golf.personas WHERE user_id = $1", uid
            )
            return result == "DELETE 1"
