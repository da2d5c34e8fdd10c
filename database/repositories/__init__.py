from .club_repo import ClubRepositoryDB
from .persona_repo import PersonaRepositoryDB
from .round_repo import RoundRepositoryDB

__all__ = ["ClubRepositoryDB", "PersonaRepositoryDB", "RoundRepositoryDB"]
