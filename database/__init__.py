from database.connection import DatabasePool, db
from database.db_manager import DatabaseManager
from database.repositories import ClubRepositoryDB, PersonaRepositoryDB, RoundRepositoryDB
from database.exceptions import DatabaseError, IntegrityError

__all__ = [
    "DatabasePool",
    "db",
    "DatabaseManager",
    "ClubRepositoryDB",
    "PersonaRepositoryDB",
    "RoundRepositoryDB",
    "DatabaseError",
    "IntegrityError",
]
