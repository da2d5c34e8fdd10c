class DatabaseError(Exception):
    """Base for all persistence errors."""


class IntegrityError(DatabaseError):
    """Check constraint or malformed identifier rejected by the database."""
