"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class MinibankConfig(BaseSettings):
    """Minibank configuration"""
    
    # Error taxonomy: False keeps INVALID_AMOUNT for missing fields and currency mismatch
    strict_error_codes: bool = False
    
    # Transaction id configuration
    transaction_id_prefix: str = "tx_"
    transaction_id_suffix_length: int = 13
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr
    
    class Config:
        env_prefix = "MINIBANK_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = MinibankConfig()


def get_config() -> MinibankConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> MinibankConfig:
    """Reload configuration from environment"""
    global config
    config = MinibankConfig()
    return config
