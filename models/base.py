from pydantic import BaseModel, ConfigDict


class BaseGolfModel(BaseModel):
    """Stored golf records: re-validated on assignment, populated by field name or alias."""
    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)
