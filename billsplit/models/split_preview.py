"""Live split preview"""
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict

from billsplit.models.split_participant import SplitParticipant
from billsplit.models.validation_result import ValidationResult


class SplitPreview(BaseModel):
    """Allocation computed from the current configuration, with its validation outcome"""

    participants: List[SplitParticipant]
    validation: ValidationResult
    total_allocated: Decimal
    remaining: Decimal

    model_config = ConfigDict(frozen=True)
