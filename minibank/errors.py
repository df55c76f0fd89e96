"""
Error Taxonomy Module

Withdrawal and account failures are plain values, never raised.
The legacy taxonomy reuses INVALID_AMOUNT for missing account fields and
currency mismatch; the strict taxonomy gives those their own codes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ErrorCode(Enum):
    """Failure codes returned by the validator and the processor"""
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"

    # Strict taxonomy only
    MISSING_FIELDS = "MISSING_FIELDS"
    CURRENCY_MISMATCH = "CURRENCY_MISMATCH"


MISSING_FIELDS_MESSAGE = "Missing required account fields"
ACCOUNT_NOT_FOUND_MESSAGE = "Account not found"
NON_POSITIVE_AMOUNT_MESSAGE = "Withdrawal amount must be positive"
CURRENCY_MISMATCH_MESSAGE = "Currency mismatch"
INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds for withdrawal"


@dataclass(frozen=True)
class WithdrawalError:
    """Failed validation or withdrawal"""
    code: ErrorCode
    message: str

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code.value, "message": self.message}


def missing_fields_error(strict_codes: bool = False) -> WithdrawalError:
    code = ErrorCode.MISSING_FIELDS if strict_codes else ErrorCode.INVALID_AMOUNT
    return WithdrawalError(code, MISSING_FIELDS_MESSAGE)


def currency_mismatch_error(strict_codes: bool = False) -> WithdrawalError:
    code = ErrorCode.CURRENCY_MISMATCH if strict_codes else ErrorCode.INVALID_AMOUNT
    return WithdrawalError(code, CURRENCY_MISMATCH_MESSAGE)


def account_not_found_error() -> WithdrawalError:
    return WithdrawalError(ErrorCode.ACCOUNT_NOT_FOUND, ACCOUNT_NOT_FOUND_MESSAGE)


def non_positive_amount_error() -> WithdrawalError:
    return WithdrawalError(ErrorCode.INVALID_AMOUNT, NON_POSITIVE_AMOUNT_MESSAGE)


def insufficient_funds_error() -> WithdrawalError:
    return WithdrawalError(ErrorCode.INSUFFICIENT_FUNDS, INSUFFICIENT_FUNDS_MESSAGE)
