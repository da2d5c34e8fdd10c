from pathlib import Path
from typing import Optional

import asyncpg

from database.exceptions import DatabaseError
from database.repositories import ClubRepositoryDB, PersonaRepositoryDB, RoundRepositoryDB


class DatabaseManager:
    """Groups the repositories that share one connection pool."""

    def __init__(self, pool: asyncpg.Pool, schema_path: Optional[str] = None) -> None:
        self._pool = pool
        self.schema_path = Path(
            schema_path or Path(__file__).with_name("schema.sql")
        ).resolve()
        self.rounds = RoundRepositoryDB(pool)
        self.personas = PersonaRepositoryDB(pool)
        self.clubs = ClubRepositoryDB(pool)

    async def initialize_schema(self) -> None:
        """Create the schema and tables from `database/schema.sql` if missing."""
        if not self.schema_path.exists():
            raise DatabaseError(f"Schema file not found: {self.schema_path}")

        sql_text = self.schema_path.read_text(encoding="utf-8")
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                await conn.execute(sql_text)
