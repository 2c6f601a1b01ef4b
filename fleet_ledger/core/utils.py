"""
Utility functions for the application.
"""
from typing import Any, Dict
from datetime import date, datetime
import math

CREDIT = "credit"
DEBIT = "debit"


def credit_or_debit(amount) -> str:
    """Classify a signed amount: zero and positive are credits."""
    if amount < 0:
        return DEBIT
    return CREDIT


def unsigned(amount) -> int:
    """Absolute value truncated to whole minor units."""
    return int(math.floor(abs(amount)))


def serialize_date(obj: Any) -> str:
    """Serialize date objects to ISO format strings."""
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    raise TypeError(f"Type {type(obj)} not serializable")


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response
