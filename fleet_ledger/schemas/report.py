"""
Pydantic schemas for pricing and ledger reports.
"""
from pydantic import BaseModel
from typing import List, Dict, Any


class CommissionResponse(BaseModel):
    """Schema for the commission split of a rental."""
    insurance_fee: int
    assistance_fee: int
    platform_fee: int  # Residual, may be negative


class OptionsResponse(BaseModel):
    """Schema for optional add-on fees."""
    deductible_reduction: int


class ActionItem(BaseModel):
    """Schema for one actor's signed amount."""
    who: str
    type: str  # "credit" or "debit"
    amount: int


class QuoteResponse(BaseModel):
    """Schema for a single priced rental."""
    id: int
    price: int
    commission: CommissionResponse
    options: OptionsResponse
    actions: List[ActionItem]


class BatchReportResponse(BaseModel):
    """Schema for a batch report and the records that could not be processed."""
    style: str
    report: Dict[str, Any]
    errors: List[Dict[str, Any]] = []
