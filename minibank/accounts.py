"""
Account Module

In-memory account record and the required-fields check that gates its use.
The record is owned by the caller; the withdrawal processor mutates its
balance in place.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from .currency import to_decimal
from .errors import WithdrawalError, missing_fields_error


@dataclass
class Owner:
    """Account holder. Its fields are not validated."""
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
        }


@dataclass
class BankAccount:
    """
    Single-currency account state

    id, currency and owner may be empty here; validate_account decides
    whether the record is usable.
    """
    id: Optional[str]
    balance: Optional[Decimal]
    currency: Optional[str]
    owner: Optional[Owner] = None

    def __post_init__(self):
        if self.balance is not None:
            self.balance = to_decimal(self.balance)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, balance as a decimal string"""
        return {
            "id": self.id,
            "balance": str(self.balance) if self.balance is not None else None,
            "currency": self.currency,
            "owner": self.owner.to_dict() if self.owner else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BankAccount':
        """Create instance from dictionary; missing keys become None"""
        owner = data.get("owner")
        if isinstance(owner, dict):
            owner = Owner(
                id=owner.get("id"),
                first_name=owner.get("first_name"),
                last_name=owner.get("last_name"),
            )

        return cls(
            id=data.get("id"),
            balance=data.get("balance"),
            currency=data.get("currency"),
            owner=owner,
        )


def validate_account(
    account: BankAccount,
    strict_codes: bool = False
) -> Union[BankAccount, WithdrawalError]:
    """
    Check that an account has the fields required for use

    id, currency and owner are checked in that order by truthiness, so an
    empty string or None counts as missing.

    Args:
        account: Candidate account record
        strict_codes: Report MISSING_FIELDS instead of INVALID_AMOUNT

    Returns:
        The same account object, or a WithdrawalError
    """
    if not account.id or not account.currency or not account.owner:
        return missing_fields_error(strict_codes)

    return account
