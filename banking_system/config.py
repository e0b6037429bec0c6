"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings


class BankingConfig(BaseSettings):
    """Banking system configuration"""

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # Currency configuration
    reference_currency: str = "USD"
    legacy_conversion_rate: str = "0.85"  # Decimal as string

    # Display configuration
    display_precision: int = 2

    # Prototype used by the transactions screen
    monthly_payment_template: str = "monthlyPayment"

    class Config:
        env_prefix = "BANKING_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = BankingConfig()


def get_config() -> BankingConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankingConfig:
    """Reload configuration from environment"""
    global config
    config = BankingConfig()
    return config
