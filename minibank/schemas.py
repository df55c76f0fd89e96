"""
Pydantic schemas for external account and withdrawal payloads

Payloads use camelCase keys (accountId, firstName, remainingBalance);
core values use snake_case dataclasses.
"""

from decimal import Decimal
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

from .accounts import BankAccount, Owner
from .errors import WithdrawalError
from .transactions import (
    Transaction, WithdrawalOutcome, WithdrawalRequest, WithdrawalResult
)


class OwnerModel(BaseModel):
    id: Optional[str] = None
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")

    model_config = ConfigDict(populate_by_name=True)

    def to_owner(self) -> Owner:
        return Owner(id=self.id, first_name=self.first_name, last_name=self.last_name)


class AccountModel(BaseModel):
    # Everything optional: incomplete records are rejected by validate_account
    id: Optional[str] = None
    balance: Optional[Decimal] = None
    currency: Optional[str] = None
    owner: Optional[OwnerModel] = None

    def to_account(self) -> BankAccount:
        return BankAccount(
            id=self.id,
            balance=self.balance,
            currency=self.currency,
            owner=self.owner.to_owner() if self.owner else None
        )

    @classmethod
    def from_account(cls, account: BankAccount) -> 'AccountModel':
        owner = None
        if account.owner:
            owner = OwnerModel(
                id=account.owner.id,
                first_name=account.owner.first_name,
                last_name=account.owner.last_name
            )
        return cls(
            id=account.id,
            balance=account.balance,
            currency=account.currency,
            owner=owner
        )


class WithdrawalRequestModel(BaseModel):
    account_id: str = Field(..., alias="accountId")
    amount: Decimal = Field(..., description="Withdrawal amount")
    currency: str = Field(..., description="Currency code, compared verbatim")
    timestamp: Any = None

    model_config = ConfigDict(populate_by_name=True)

    def to_request(self) -> WithdrawalRequest:
        return WithdrawalRequest(
            account_id=self.account_id,
            amount=self.amount,
            currency=self.currency,
            timestamp=self.timestamp
        )


class TransactionModel(BaseModel):
    id: str
    amount: Decimal
    currency: str
    timestamp: Any = None
    remaining_balance: Decimal = Field(..., alias="remainingBalance")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> 'TransactionModel':
        return cls(
            id=transaction.id,
            amount=transaction.amount,
            currency=transaction.currency,
            timestamp=transaction.timestamp,
            remaining_balance=transaction.remaining_balance
        )


class WithdrawalResultModel(BaseModel):
    success: bool = True
    transaction: TransactionModel

    @classmethod
    def from_result(cls, result: WithdrawalResult) -> 'WithdrawalResultModel':
        return cls(transaction=TransactionModel.from_transaction(result.transaction))


class WithdrawalErrorModel(BaseModel):
    code: str
    message: str

    @classmethod
    def from_error(cls, error: WithdrawalError) -> 'WithdrawalErrorModel':
        return cls(code=error.code.value, message=error.message)


def outcome_to_payload(outcome: WithdrawalOutcome) -> Dict[str, Any]:
    """Render a result or an error as a camelCase JSON-ready dict"""
    if isinstance(outcome, WithdrawalError):
        model = WithdrawalErrorModel.from_error(outcome)
    else:
        model = WithdrawalResultModel.from_result(outcome)
    return model.model_dump(by_alias=True, mode="json")
