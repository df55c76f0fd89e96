"""
Withdrawal Processing Module

Validates a withdrawal request against one account and, when every check
passes, debits the account in place and returns a transaction record.

Checks run in a fixed order and stop at the first failure:
    1. request account id matches the account
    2. amount is positive
    3. request currency matches the account currency
    4. amount does not exceed the balance

Failures come back as WithdrawalError values and leave the account untouched.
Not safe for concurrent withdrawals against the same account: the checks
and the balance write are a read-modify-write sequence.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from .accounts import BankAccount
from .config import MinibankConfig
from .currency import subtract_exact, to_decimal
from .errors import (
    WithdrawalError, account_not_found_error, currency_mismatch_error,
    insufficient_funds_error, non_positive_amount_error
)
from .ids import TimestampIdGenerator, TransactionIdGenerator


@dataclass
class WithdrawalRequest:
    """Withdrawal intent; timestamp is echoed back uninterpreted"""
    account_id: str
    amount: Decimal
    currency: str
    timestamp: Any = None

    def __post_init__(self):
        self.amount = to_decimal(self.amount)


@dataclass(frozen=True)
class Transaction:
    """Completed withdrawal. Returned to the caller, never stored."""
    id: str
    amount: Decimal
    currency: str
    timestamp: Any
    remaining_balance: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "amount": str(self.amount),
            "currency": self.currency,
            "timestamp": self.timestamp,
            "remaining_balance": str(self.remaining_balance),
        }


@dataclass(frozen=True)
class WithdrawalResult:
    """Successful withdrawal"""
    transaction: Transaction

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"success": True, "transaction": self.transaction.to_dict()}


WithdrawalOutcome = Union[WithdrawalResult, WithdrawalError]


class WithdrawalProcessor:
    """
    Runs the withdrawal check chain and applies the debit
    """

    def __init__(
        self,
        id_generator: Optional[TransactionIdGenerator] = None,
        strict_codes: bool = False
    ):
        self.id_generator = id_generator or TimestampIdGenerator()
        self.strict_codes = strict_codes

    @classmethod
    def from_config(
        cls,
        config: MinibankConfig,
        id_generator: Optional[TransactionIdGenerator] = None
    ) -> 'WithdrawalProcessor':
        """Build a processor from settings"""
        if id_generator is None:
            id_generator = TimestampIdGenerator(
                prefix=config.transaction_id_prefix,
                suffix_length=config.transaction_id_suffix_length
            )
        return cls(id_generator=id_generator, strict_codes=config.strict_error_codes)

    def validate(
        self,
        account: BankAccount,
        request: WithdrawalRequest
    ) -> Optional[WithdrawalError]:
        """
        Run the check chain without touching the account

        Returns:
            The first failing check's error, or None if all checks pass
        """
        if request.account_id != account.id:
            return account_not_found_error()

        if request.amount <= Decimal('0'):
            return non_positive_amount_error()

        if request.currency != account.currency:
            return currency_mismatch_error(self.strict_codes)

        if account.balance is None:
            raise ValueError(f"Account {account.id} has no balance")

        if request.amount > account.balance:
            return insufficient_funds_error()

        return None

    def process(
        self,
        account: BankAccount,
        request: WithdrawalRequest
    ) -> WithdrawalOutcome:
        """
        Validate a withdrawal and debit the account

        Args:
            account: Account to debit, mutated in place on success
            request: Withdrawal to apply

        Returns:
            WithdrawalResult on success, WithdrawalError otherwise
        """
        error = self.validate(account, request)
        if error is not None:
            return error

        remaining_balance = subtract_exact(account.balance, request.amount)

        # Generated before the write so a failing generator leaves the balance intact
        transaction_id = self.id_generator()

        account.balance = remaining_balance

        return WithdrawalResult(
            transaction=Transaction(
                id=transaction_id,
                amount=request.amount,
                currency=request.currency,
                timestamp=request.timestamp,
                remaining_balance=remaining_balance
            )
        )


def process_withdrawal(
    account: BankAccount,
    request: WithdrawalRequest,
    id_generator: Optional[TransactionIdGenerator] = None,
    strict_codes: bool = False
) -> WithdrawalOutcome:
    """Convenience wrapper around WithdrawalProcessor.process"""
    processor = WithdrawalProcessor(id_generator=id_generator, strict_codes=strict_codes)
    return processor.process(account, request)
