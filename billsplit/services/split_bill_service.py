"""Split bill business logic"""
import logging

from billsplit.core.exceptions import ValidationError
from billsplit.models.split_bill import SplitBill
from billsplit.models.split_type import SplitType
from billsplit.schemas.split import SplitBillCreate
from billsplit.services.split_calculation_service import SplitCalculationService

logger = logging.getLogger(__name__)


class SplitBillService:
    """Service for finalizing split bills"""

    @staticmethod
    def create_split_bill(bill_data: SplitBillCreate, default_currency: str = "USD") -> SplitBill:
        """
        Calculate, validate and build a split bill.

        Args:
            bill_data: Split bill creation data
            default_currency: Currency used when bill_data has none

        Returns:
            Created SplitBill

        Raises:
            ValidationError: If the split configuration is not valid
        """
        split_preview = SplitCalculationService.preview(
            bill_data.total_amount, bill_data.configuration
        )
        if not split_preview.validation.is_valid:
            raise ValidationError(
                split_preview.validation.error,
                details={"total_allocated": str(split_preview.total_allocated)}
            )

        split_bill = SplitBill(
            title=bill_data.title,
            total_amount=bill_data.total_amount,
            currency=(bill_data.currency or default_currency).upper(),
            paid_by_id=bill_data.paid_by_id,
            split_type=SplitType(bill_data.configuration.split_type),
            participants=split_preview.participants,
            notes=bill_data.notes,
            category=bill_data.category,
            expense_date=bill_data.expense_date,
            group_id=bill_data.group_id,
        )

        logger.info(
            "Created split bill %s (%s, %s %s, %d participants)",
            split_bill.id, split_bill.split_type.value, split_bill.total_amount,
            split_bill.currency, len(split_bill.participants)
        )
        return split_bill
