"""
Report service: read accessors over priced rentals and the table of report styles.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Tuple
import logging

from fleet_ledger.core.errors import ValidationError
from fleet_ledger.models.rental import Rental

logger = logging.getLogger(__name__)


def price_breakdown(rental: Rental) -> int:
    """Price charged to the driver once the discount is applied."""
    return rental.discounted_price


def commission_breakdown(rental: Rental) -> Dict[str, int]:
    return rental.commission.as_dict()


def options_breakdown(rental: Rental) -> Dict[str, int]:
    return dict(rental.options)


def actions(rental: Rental) -> List[Dict[str, Any]]:
    """Signed amount of each actor's most recent statement."""
    items = []
    for actor, history in rental.ledger.items():
        statement = history.latest
        if statement is None:
            continue
        items.append({"who": actor.value, "type": statement.type, "amount": statement.unsigned_amount})
    return items


def outstanding(rental: Rental) -> List[Dict[str, Any]]:
    """Outstanding amount of each actor, for actors where it has been computed."""
    items = []
    for actor, history in rental.ledger.items():
        if history.outstanding_amount is None or history.outstanding_type is None:
            continue
        items.append({
            "who": actor.value,
            "type": history.outstanding_type,
            "amount": history.outstanding_amount
        })
    return items


@dataclass(frozen=True)
class ReportStyle:
    """
    Named report layout.

    required_fields are rental attributes that must be set for a rental to be
    reported; included_fields pairs each output key with its accessor.
    Numbered styles emit their own running id and move the rental id to
    `rental_id`.
    """
    name: str
    collection_key: str
    required_fields: Tuple[str, ...]
    included_fields: Tuple[Tuple[str, Callable[[Rental], Any]], ...]
    numbered: bool = False


REPORT_STYLES = {
    style.name: style
    for style in (
        ReportStyle(
            "price", "rentals",
            ("id", "discounted_price"),
            (("price", price_breakdown),),
        ),
        ReportStyle(
            "commission", "rentals",
            ("id", "discounted_price", "commission"),
            (("price", price_breakdown), ("commission", commission_breakdown)),
        ),
        ReportStyle(
            "options", "rentals",
            ("id", "discounted_price", "commission", "options"),
            (("price", price_breakdown), ("options", options_breakdown), ("commission", commission_breakdown)),
        ),
        ReportStyle(
            "actions", "rentals",
            ("id", "ledger"),
            (("actions", actions),),
        ),
        ReportStyle(
            "modifications", "rental_modifications",
            ("id", "ledger"),
            (("actions", outstanding),),
            numbered=True,
        ),
    )
}

STYLE_ALIASES = {
    "level1": "price",
    "level2": "price",
    "level3": "commission",
    "level4": "options",
    "level5": "actions",
    "level6": "modifications",
}


def resolve_style(name: str) -> ReportStyle:
    """Look up a report style by name or level alias."""
    key = STYLE_ALIASES.get(name, name)
    try:
        return REPORT_STYLES[key]
    except KeyError:
        raise ValidationError(f"Unknown report style '{name}'") from None


def report_item(rental: Rental, style: ReportStyle) -> Dict[str, Any]:
    """
    Build one report entry for a rental.
    Returns an empty dict when the rental lacks a required field or has nothing to report.
    """
    missing = [field for field in style.required_fields if getattr(rental, field, None) is None]
    if missing:
        logger.warning(f"Rental {rental.id} left out of '{style.name}' report, missing {', '.join(missing)}")
        return {}

    item = {"id": rental.id}
    for key, accessor in style.included_fields:
        value = accessor(rental)
        if isinstance(value, list) and not value:
            return {}
        item[key] = value
    return item


def build_report(rentals: Iterable[Rental], style: str = "price") -> Dict[str, List[Dict[str, Any]]]:
    """Build the report for a collection of rentals in the given style."""
    report_style = resolve_style(style) if isinstance(style, str) else style
    entries = []
    for rental in rentals:
        item = report_item(rental, report_style)
        if not item:
            continue
        if report_style.numbered:
            rental_id = item.pop("id")
            item = {"id": len(entries) + 1, "rental_id": rental_id, **item}
        entries.append(item)
    logger.info(f"Built '{report_style.name}' report with {len(entries)} entries")
    return {report_style.collection_key: entries}
