"""Split bill endpoints"""
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, status

from billsplit.config import Settings, get_settings
from billsplit.models.split_bill import SplitBill
from billsplit.models.split_preview import SplitPreview
from billsplit.models.validation_result import ValidationResult
from billsplit.schemas.split import (ConfigurationResetRequest,
                                     EqualAmountResponse, SplitBillCreate,
                                     SplitCalculationRequest,
                                     SplitValidationRequest)
from billsplit.services.split_bill_service import SplitBillService
from billsplit.services.split_calculation_service import SplitCalculationService
from billsplit.services.split_wizard import SplitConfiguration, reset_configuration

router = APIRouter(prefix="/splits", tags=["Splits"])


@router.post("/calculate", response_model=SplitPreview)
async def calculate_split(request: SplitCalculationRequest):
    """
    Calculate participant amounts for a split configuration.

    Called on every configuration change to render a live preview. The
    response always carries the validation outcome; an invalid
    configuration is not an error.

    Args:
        request: Total amount and split configuration

    Returns:
        Participants, validation result, allocated and remaining amounts
    """
    return SplitCalculationService.preview(request.total_amount, request.configuration)


@router.post("/validate", response_model=ValidationResult)
async def validate_split(request: SplitValidationRequest):
    """
    Validate caller-supplied participant allocations.

    Args:
        request: Total amount, split type and participant allocations

    Returns:
        Validation result with an error message when invalid
    """
    participants = [p.to_participant() for p in request.participants]
    return SplitCalculationService.validate_split(
        request.total_amount, participants, request.split_type
    )


@router.post("/configuration/reset", response_model=SplitConfiguration)
async def reset_split_configuration(request: ConfigurationResetRequest):
    """
    Build default per-participant values for a newly selected split type.

    Args:
        request: Total amount, split type and participants

    Returns:
        Fresh configuration whose defaults form a valid split
    """
    return reset_configuration(
        request.participant_ids, request.split_type, request.total_amount
    )


@router.get("/equal-amount", response_model=EqualAmountResponse)
async def equal_amount(
    total_amount: Decimal = Query(..., ge=0, description="Total bill amount"),
    participant_count: int = Query(..., ge=1, description="Number of participants"),
):
    """
    Get the per-person amount of an equal split, floored to the cent.

    Raises:
        422: If participant_count is less than 1
    """
    return EqualAmountResponse(
        total_amount=total_amount,
        participant_count=participant_count,
        amount_per_person=SplitCalculationService.equal_amount_per_person(
            total_amount, participant_count
        ),
    )


@router.post("", response_model=SplitBill, status_code=status.HTTP_201_CREATED)
async def create_split_bill(
    bill_data: SplitBillCreate,
    settings: Settings = Depends(get_settings),
):
    """
    Finalize a split bill.

    Args:
        bill_data: Bill details and split configuration
        settings: Application settings

    Returns:
        Created split bill with participant amounts

    Raises:
        400: If the split configuration is not valid
    """
    return SplitBillService.create_split_bill(bill_data, settings.default_currency)
