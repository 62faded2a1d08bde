"""Split validation outcome"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ValidationResult(BaseModel):
    """Whether a split configuration is acceptable, with a message when it is not"""

    is_valid: bool
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, error: str) -> "ValidationResult":
        return cls(is_valid=False, error=error)
