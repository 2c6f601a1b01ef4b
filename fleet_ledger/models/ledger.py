"""
Ledger models: signed statements per actor and their append-only history.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
import enum

from fleet_ledger.core.utils import credit_or_debit, unsigned


class Actor(str, enum.Enum):
    """Economic parties taking part in a rental's ledger."""
    DRIVER = "driver"
    OWNER = "owner"
    INSURANCE = "insurance"
    ASSISTANCE = "assistance"
    PLATFORM = "platform"


class StatementStatus(str, enum.Enum):
    """Statement settlement status."""
    PENDING = "pending"
    PAID = "paid"


@dataclass(frozen=True)
class LedgerEntry:
    """One labelled amount on a statement. Entries are debits unless told otherwise."""
    type: str
    amount: int
    debit: bool = True

    @property
    def signed_amount(self) -> int:
        return -self.amount if self.debit else self.amount


class Statement:
    """Signed aggregate of ledger entries for one actor and one payments pass."""

    def __init__(self, actor: Actor, entries: Optional[Iterable[LedgerEntry]] = None):
        self.actor = actor
        self.entries: Tuple[LedgerEntry, ...] = tuple(entries or ())
        self.raw_amount = sum(entry.signed_amount for entry in self.entries)
        self.status = StatementStatus.PENDING

    @property
    def unsigned_amount(self) -> int:
        return unsigned(self.raw_amount)

    @property
    def type(self) -> str:
        return credit_or_debit(self.raw_amount)

    @property
    def paid(self) -> bool:
        return self.status == StatementStatus.PAID

    def complete(self) -> None:
        """Mark the statement as settled. There is no way back to pending."""
        self.status = StatementStatus.PAID

    def __repr__(self) -> str:
        return (
            f"Statement(actor={self.actor.value!r}, raw_amount={self.raw_amount}, "
            f"status={self.status.value!r})"
        )


class StatementHistory:
    """
    Append-only sequence of statements for one actor of one rental.

    The outstanding figures stay None until amount_outstanding() runs.
    Paid statements count with their sign flipped, so outstanding tracks what
    remains to reconcile rather than a running balance.
    """

    def __init__(self, actor: Actor):
        self.actor = actor
        self.statements: List[Statement] = []
        self.outstanding_raw: Optional[int] = None
        self.outstanding_amount: Optional[int] = None
        self.outstanding_type: Optional[str] = None

    def add_statement(self, statement: Statement) -> None:
        self.statements.append(statement)

    @property
    def latest(self) -> Optional[Statement]:
        return self.statements[-1] if self.statements else None

    @property
    def pending(self) -> List[Statement]:
        return [statement for statement in self.statements if not statement.paid]

    def issue_payments(self) -> int:
        """Mark every pending statement as paid. Returns how many were settled."""
        pending = self.pending
        for statement in pending:
            statement.complete()
        return len(pending)

    def amount_outstanding(self) -> int:
        """Recompute the outstanding figures in insertion order."""
        outstanding_raw = 0
        for statement in self.statements:
            multiplier = -1 if statement.paid else 1
            outstanding_raw += statement.raw_amount * multiplier
        self.outstanding_raw = outstanding_raw
        self.outstanding_type = credit_or_debit(outstanding_raw)
        self.outstanding_amount = unsigned(outstanding_raw)
        return self.outstanding_amount

    def __len__(self) -> int:
        return len(self.statements)
