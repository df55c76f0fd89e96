"""
Test suite for payload schemas

Tests camelCase translation between external payloads and core values.
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from minibank.accounts import validate_account
from minibank.errors import WithdrawalError
from minibank.ids import SequentialIdGenerator
from minibank.schemas import (
    AccountModel, WithdrawalRequestModel, outcome_to_payload
)
from minibank.transactions import process_withdrawal


class TestAccountModel:
    
    def test_parse_account(self):
        model = AccountModel.model_validate({
            "id": "acc1",
            "balance": 1000,
            "currency": "USD",
            "owner": {"id": "u1", "firstName": "Jan", "lastName": "Kowalski"},
        })
        account = model.to_account()
        
        assert account.id == "acc1"
        assert account.balance == Decimal('1000')
        assert account.owner.first_name == "Jan"
        assert account.owner.last_name == "Kowalski"
    
    def test_incomplete_account_reaches_validator(self):
        """Test missing fields are reported by the validator, not by parsing"""
        account = AccountModel.model_validate({"id": "", "currency": "USD", "owner": {}}).to_account()
        result = validate_account(account)
        
        assert isinstance(result, WithdrawalError)
        assert result.message == "Missing required account fields"
    
    def test_from_account(self):
        account = AccountModel.model_validate({
            "id": "acc1", "balance": "5.25", "currency": "EUR",
            "owner": {"id": "u1", "firstName": "A", "lastName": "B"},
        }).to_account()
        
        dumped = AccountModel.from_account(account).model_dump(by_alias=True, mode="json")
        assert dumped["balance"] == "5.25"
        assert dumped["owner"] == {"id": "u1", "firstName": "A", "lastName": "B"}


class TestWithdrawalRequestModel:
    
    def test_camel_case_payload(self):
        request = WithdrawalRequestModel.model_validate({
            "accountId": "acc1", "amount": 200, "currency": "USD", "timestamp": 1000,
        }).to_request()
        
        assert request.account_id == "acc1"
        assert request.amount == Decimal('200')
        assert request.timestamp == 1000
    
    def test_snake_case_accepted(self):
        model = WithdrawalRequestModel(account_id="acc1", amount="1.5", currency="USD")
        assert model.to_request().amount == Decimal('1.5')
    
    def test_missing_amount_rejected(self):
        with pytest.raises(ValidationError):
            WithdrawalRequestModel.model_validate({"accountId": "acc1", "currency": "USD"})


class TestOutcomePayload:
    
    def setup_method(self):
        self.account = AccountModel.model_validate({
            "id": "acc1", "balance": 1000, "currency": "USD", "owner": {"id": "u1"},
        }).to_account()
    
    def test_success_payload(self):
        request = WithdrawalRequestModel.model_validate({
            "accountId": "acc1", "amount": 200, "currency": "USD", "timestamp": 1000,
        }).to_request()
        result = process_withdrawal(self.account, request, id_generator=SequentialIdGenerator())
        
        assert outcome_to_payload(result) == {
            "success": True,
            "transaction": {
                "id": "tx_1",
                "amount": "200",
                "currency": "USD",
                "timestamp": 1000,
                "remainingBalance": "800",
            },
        }
    
    def test_error_payload(self):
        request = WithdrawalRequestModel.model_validate({
            "accountId": "acc1", "amount": 200, "currency": "EUR", "timestamp": 1000,
        }).to_request()
        result = process_withdrawal(self.account, request)
        
        assert outcome_to_payload(result) == {
            "code": "INVALID_AMOUNT",
            "message": "Currency mismatch",
        }
