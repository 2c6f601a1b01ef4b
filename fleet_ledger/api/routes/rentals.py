"""
Rental pricing and ledger report routes.
"""
from fastapi import APIRouter, HTTPException, status
from typing import Optional
from fleet_ledger.core.errors import LedgerError, ValidationError
from fleet_ledger.schemas.rental import BatchRequest, QuoteRequest
from fleet_ledger.schemas.report import BatchReportResponse, QuoteResponse
from fleet_ledger.services import report_service
from fleet_ledger.services.catalog_service import process_batch
from fleet_ledger.services.rental_service import build_car, build_rental

router = APIRouter(prefix="/rentals", tags=["rentals"])


@router.post("/report", response_model=BatchReportResponse)
async def batch_report(batch: BatchRequest, style: Optional[str] = None):
    """Price a batch of rentals, settle them, apply modifications and report."""
    from fleet_ledger.core.config import settings

    style = style or settings.DEFAULT_REPORT_STYLE
    try:
        report, errors = process_batch(batch, style)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return {"style": report_service.resolve_style(style).name, "report": report, "errors": errors}


@router.post("/quote", response_model=QuoteResponse)
async def quote_rental(quote: QuoteRequest):
    """Price a single rental of a single car."""
    try:
        car = build_car(quote.car.id, quote.car.price_per_day, quote.car.price_per_km)
        rental = build_rental(
            quote.rental.id,
            car,
            quote.rental.start_date,
            quote.rental.end_date,
            quote.rental.distance,
            quote.rental.deductible_reduction
        )
    except LedgerError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )

    return {
        "id": rental.id,
        "price": report_service.price_breakdown(rental),
        "commission": report_service.commission_breakdown(rental),
        "options": report_service.options_breakdown(rental),
        "actions": report_service.actions(rental)
    }
