"""Per-strategy split configuration"""
from decimal import Decimal
from typing import Annotated, Dict, List, Literal, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from billsplit.utils.decimal_utils import round_decimal, to_decimal


class _SplitConfigBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class EqualSplitConfig(_SplitConfigBase):
    """Divide the total evenly across participant_ids"""

    split_type: Literal["EQUAL"] = "EQUAL"
    participant_ids: List[UUID]


class ExactAmountsConfig(_SplitConfigBase):
    """Explicit amount per participant"""

    split_type: Literal["EXACT_AMOUNTS"] = "EXACT_AMOUNTS"
    amounts: Dict[UUID, Decimal]

    @field_validator("amounts", mode="before")
    @classmethod
    def convert_amounts(cls, v):
        """Convert amounts to two-place Decimal"""
        if not isinstance(v, dict):
            return v
        return {k: round_decimal(to_decimal(a)) for k, a in v.items()}


class PercentagesConfig(_SplitConfigBase):
    """Percentage of the total per participant"""

    split_type: Literal["PERCENTAGES"] = "PERCENTAGES"
    percentages: Dict[UUID, Decimal]

    @field_validator("percentages", mode="before")
    @classmethod
    def convert_percentages(cls, v):
        """Convert percentages to Decimal"""
        if not isinstance(v, dict):
            return v
        return {k: to_decimal(p) for k, p in v.items()}


class SharesConfig(_SplitConfigBase):
    """Integer share weight per participant"""

    split_type: Literal["SHARES"] = "SHARES"
    shares: Dict[UUID, int]


class AdjustmentsConfig(_SplitConfigBase):
    """Equal split plus a signed adjustment per participant"""

    split_type: Literal["ADJUSTMENTS"] = "ADJUSTMENTS"
    participant_ids: List[UUID]
    adjustments: Dict[UUID, Decimal] = Field(default_factory=dict)

    @field_validator("adjustments", mode="before")
    @classmethod
    def convert_adjustments(cls, v):
        """Convert adjustments to two-place Decimal"""
        if not isinstance(v, dict):
            return v
        return {k: round_decimal(to_decimal(a)) for k, a in v.items()}


SplitConfig = Annotated[
    Union[
        EqualSplitConfig,
        ExactAmountsConfig,
        PercentagesConfig,
        SharesConfig,
        AdjustmentsConfig,
    ],
    Field(discriminator="split_type"),
]
