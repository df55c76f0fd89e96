"""
Teller Module

Caller-side facade over the validator and the withdrawal processor.
Keeps accounts in an instance-level map keyed by account id and logs every
outcome. Intended for single-threaded use: concurrent withdrawals against
one account are not serialized.
"""

from typing import Dict, List, Optional, Union

from .accounts import BankAccount, validate_account
from .config import MinibankConfig, get_config
from .currency import format_amount
from .errors import WithdrawalError, account_not_found_error
from .ids import TransactionIdGenerator
from .logging_config import get_logger, log_action, setup_logging
from .transactions import WithdrawalOutcome, WithdrawalProcessor, WithdrawalRequest


class Teller:
    """
    Opens accounts and processes withdrawals against them
    """
    
    def __init__(
        self,
        config: Optional[MinibankConfig] = None,
        id_generator: Optional[TransactionIdGenerator] = None
    ):
        self.config = config or get_config()
        self.processor = WithdrawalProcessor.from_config(self.config, id_generator)
        setup_logging(
            self.config.log_level, "minibank",
            self.config.log_format, self.config.log_file
        )
        self.logger = get_logger("minibank.teller")
        self._accounts: Dict[str, BankAccount] = {}
    
    def open_account(self, account: BankAccount) -> Union[BankAccount, WithdrawalError]:
        """
        Validate an account and keep it for later withdrawals
        
        Args:
            account: Candidate account record
            
        Returns:
            The stored account, or the validation error
        """
        result = validate_account(account, strict_codes=self.config.strict_error_codes)
        
        if isinstance(result, WithdrawalError):
            log_action(
                self.logger, "warning", f"Account rejected: {result.message}",
                action="open_account", resource=f"account:{account.id}",
                details={"code": result.code.value}
            )
            return result
        
        self._accounts[result.id] = result
        
        log_action(
            self.logger, "info", "Account opened",
            action="open_account", resource=f"account:{result.id}",
            details={"currency": result.currency, "balance": str(result.balance)}
        )
        return result
    
    def get_account(self, account_id: str) -> Optional[BankAccount]:
        """Get account by ID"""
        return self._accounts.get(account_id)
    
    def list_accounts(self) -> List[BankAccount]:
        return list(self._accounts.values())
    
    def close_account(self, account_id: str) -> bool:
        """Forget an account. Returns False if it was not open."""
        if self._accounts.pop(account_id, None) is None:
            return False
        
        log_action(
            self.logger, "info", "Account closed",
            action="close_account", resource=f"account:{account_id}"
        )
        return True
    
    def withdraw(self, request: WithdrawalRequest) -> WithdrawalOutcome:
        """
        Withdraw from the account named by the request
        
        Args:
            request: Withdrawal to apply
            
        Returns:
            WithdrawalResult on success, WithdrawalError otherwise
        """
        account = self._accounts.get(request.account_id)
        if account is None:
            outcome = account_not_found_error()
        else:
            outcome = self.processor.process(account, request)
        
        if isinstance(outcome, WithdrawalError):
            log_action(
                self.logger, "warning", f"Withdrawal rejected: {outcome.message}",
                action="withdraw", resource=f"account:{request.account_id}",
                details={
                    "code": outcome.code.value,
                    "amount": str(request.amount),
                    "currency": request.currency
                }
            )
        else:
            transaction = outcome.transaction
            log_action(
                self.logger, "info",
                f"Withdrawal completed: {format_amount(transaction.amount, transaction.currency)}",
                action="withdraw", resource=f"account:{request.account_id}",
                correlation_id=transaction.id,
                details={
                    "transaction_id": transaction.id,
                    "remaining_balance": str(transaction.remaining_balance)
                }
            )
        
        return outcome
