"""Two-stage handling of model output: text clean-up, then schema validation."""

import re
from dataclasses import dataclass
from typing import Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)

_CODE_FENCE = re.compile(r"```(?:json)?\s*|\s*```", re.IGNORECASE)
_SMART_QUOTES = str.maketrans({
    "“": '"',
    "”": '"',
    "‘": "'",
    "’": "'",
})


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a validated value or the reason validation failed."""
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "ParseResult[T]":
        return cls(error=reason)


def sanitize_response_text(text: str) -> str:
    """Strip markdown code fences and smart quotes, and trim surrounding prose."""
    cleaned = _CODE_FENCE.sub("", text).translate(_SMART_QUOTES).strip()
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end > start:
        cleaned = cleaned[start:end + 1]
    return cleaned


def parse_response(text: Optional[str], response_model: Type[T]) -> ParseResult[T]:
    """Validate model output against ``response_model``. Never raises."""
    if not text or not text.strip():
        return ParseResult.failure("empty response")

    cleaned = sanitize_response_text(text)
    try:
        return ParseResult.success(response_model.model_validate_json(cleaned))
    except ValidationError as e:
        return ParseResult.failure(
            f"{response_model.__name__} validation failed: {e.errors()[0]['msg']}"
        )
