"""
Test suite for accounts module

Tests the account record and the required-fields check.
"""

import pytest
from decimal import Decimal

from minibank.accounts import BankAccount, Owner, validate_account
from minibank.errors import ErrorCode, WithdrawalError


def make_owner():
    return Owner(id="owner1", first_name="Jan", last_name="Kowalski")


class TestBankAccount:
    """Test BankAccount record"""
    
    def test_balance_coerced_to_decimal(self):
        """Test int, str and float balances become Decimal"""
        assert BankAccount("acc1", 1000, "USD", make_owner()).balance == Decimal('1000')
        assert BankAccount("acc1", "10.50", "USD", make_owner()).balance == Decimal('10.50')
        assert BankAccount("acc1", 0.1, "USD", make_owner()).balance == Decimal('0.1')
    
    def test_invalid_balance_rejected(self):
        """Test non-numeric balances raise at construction"""
        with pytest.raises(ValueError, match="Cannot convert"):
            BankAccount("acc1", "lots", "USD", make_owner())
    
    def test_from_dict_with_missing_keys(self):
        """Test missing keys become None"""
        account = BankAccount.from_dict({"id": "acc1", "balance": "5"})
        
        assert account.id == "acc1"
        assert account.balance == Decimal('5')
        assert account.currency is None
        assert account.owner is None
    
    def test_dict_roundtrip(self):
        """Test to_dict output can rebuild the account"""
        account = BankAccount("acc1", Decimal('12.34'), "EUR", make_owner())
        data = account.to_dict()
        
        assert data["balance"] == "12.34"
        assert data["owner"]["first_name"] == "Jan"
        assert BankAccount.from_dict(data) == account


class TestValidateAccount:
    """Test required-fields validation"""
    
    def test_valid_account_returned_unchanged(self):
        """Test the same object comes back on success"""
        account = BankAccount("acc1", 1000, "USD", make_owner())
        
        assert validate_account(account) is account
        assert account.balance == Decimal('1000')
    
    def test_empty_id(self):
        """Test empty id is reported as missing field"""
        account = BankAccount("", 1000, "USD", make_owner())
        result = validate_account(account)
        
        assert isinstance(result, WithdrawalError)
        assert result.code == ErrorCode.INVALID_AMOUNT
        assert result.message == "Missing required account fields"
        assert not result.success
    
    @pytest.mark.parametrize("field_name", ["id", "currency", "owner"])
    def test_missing_required_field(self, field_name):
        """Test each required field is checked"""
        account = BankAccount("acc1", 1000, "USD", make_owner())
        setattr(account, field_name, None)
        
        result = validate_account(account)
        assert isinstance(result, WithdrawalError)
        assert result.code == ErrorCode.INVALID_AMOUNT
    
    def test_balance_not_required(self):
        """Test balance presence is not checked"""
        account = BankAccount("acc1", None, "USD", make_owner())
        assert validate_account(account) is account
    
    def test_owner_shape_not_validated(self):
        """Test an empty owner still counts as present"""
        account = BankAccount("acc1", 0, "USD", Owner())
        assert validate_account(account) is account
    
    def test_strict_codes(self):
        """Test strict taxonomy reports MISSING_FIELDS"""
        account = BankAccount("acc1", 1000, "", make_owner())
        result = validate_account(account, strict_codes=True)
        
        assert result.code == ErrorCode.MISSING_FIELDS
        assert result.message == "Missing required account fields"
    
    def test_validation_is_repeatable(self):
        """Test validating twice gives the same answer"""
        bad = BankAccount("acc1", 1000, None, make_owner())
        good = BankAccount("acc1", 1000, "USD", make_owner())
        
        assert validate_account(bad) == validate_account(bad)
        assert validate_account(good) is validate_account(good)
