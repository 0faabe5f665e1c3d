"""
Client account.

Each client has exactly one account, created the first time any
event names the client. Balances are held as Money:

    available   funds the client can withdraw
    held        funds frozen by an open dispute
    total       available + held, after every operation

Once an account is locked by a chargeback it stays locked, and
every operation on it becomes a no-op that returns False.
"""

from dataclasses import dataclass, field

from payment_ledger.exceptions import InsufficientFundsError
from payment_ledger.models.money import Money


@dataclass
class Account:
    client_id: int
    available: Money = field(default_factory=Money.zero)
    held: Money = field(default_factory=Money.zero)
    total: Money = field(default_factory=Money.zero)
    locked: bool = False

    def credit(self, amount: Money) -> bool:
        """Add deposited funds."""
        if self.locked:
            return False
        self.available += amount
        self.total += amount
        return True

    def debit(self, amount: Money) -> bool:
        """
        Remove withdrawn funds.

        Raises InsufficientFundsError, leaving the balances
        untouched, when available funds do not cover the amount.
        """
        if self.locked:
            return False
        if self.available < amount:
            raise InsufficientFundsError(self.client_id, self.available, amount)
        self.available -= amount
        self.total -= amount
        return True

    def hold(self, amount: Money) -> bool:
        """Move disputed funds from available to held."""
        if self.locked:
            return False
        self.available -= amount
        self.held += amount
        return True

    def release_hold(self, amount: Money) -> bool:
        """Return resolved funds from held to available."""
        if self.locked:
            return False
        self.held -= amount
        self.available += amount
        return True

    def chargeback(self, amount: Money) -> bool:
        """Permanently remove held funds and lock the account."""
        if self.locked:
            return False
        self.held -= amount
        self.total -= amount
        self.locked = True
        return True

    def __repr__(self) -> str:
        state = "locked" if self.locked else "open"
        return (
            f"<Account client={self.client_id} available={self.available} "
            f"held={self.held} total={self.total} ({state})>"
        )


@dataclass(frozen=True)
class AccountSnapshot:
    """Read-only view of an account at one point in time."""

    client_id: int
    available: Money
    held: Money
    total: Money
    locked: bool

    @classmethod
    def from_account(cls, account: Account) -> "AccountSnapshot":
        return cls(
            client_id=account.client_id,
            available=account.available,
            held=account.held,
            total=account.total,
            locked=account.locked,
        )
