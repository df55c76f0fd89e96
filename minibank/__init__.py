"""
Minibank

A minimal single-currency account model with a validated withdrawal
operation. Balances use Decimal and failures come back as error values.
"""

from .accounts import BankAccount, Owner, validate_account
from .errors import ErrorCode, WithdrawalError
from .transactions import (
    Transaction, WithdrawalProcessor, WithdrawalRequest, WithdrawalResult,
    process_withdrawal
)

__version__ = "1.0.0"

__all__ = [
    "BankAccount",
    "ErrorCode",
    "Owner",
    "Transaction",
    "WithdrawalError",
    "WithdrawalProcessor",
    "WithdrawalRequest",
    "WithdrawalResult",
    "process_withdrawal",
    "validate_account",
]
