"""
Configuration for the Tradier API client.

Configuration can be provided programmatically or loaded from environment
variables. Instances are immutable so one process can hold several clients
configured differently (for example one sandbox and one production).
"""

import os
from dataclasses import dataclass
from typing import Optional, Union

from .exceptions import TradierConfigurationError
from .models import PRODUCTION_ACCOUNT_TYPE, AccountType


def _coerce_account_type(value: Union[str, AccountType], field_name: str) -> AccountType:
    try:
        return AccountType(value)
    except ValueError:
        valid = ", ".join(member.value for member in AccountType)
        raise TradierConfigurationError(
            f"{field_name} must be one of: {valid}, got {value!r}"
        ) from None


@dataclass(frozen=True)
class TradierConfig:
    """
    Configuration for the Tradier API client.

    Attributes:
        access_token: OAuth bearer token issued by Tradier
        account_type: Account type the token belongs to
        production_account_type: Account type routed to the production host.
            Every other account type uses the sandbox host.
        timeout: Request timeout in seconds handed to the transport
            (None leaves requests' default of no timeout)
    """

    access_token: str
    account_type: AccountType = AccountType.SANDBOX
    production_account_type: AccountType = PRODUCTION_ACCOUNT_TYPE
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.access_token:
            raise TradierConfigurationError("access_token cannot be empty")

        object.__setattr__(
            self, "account_type", _coerce_account_type(self.account_type, "account_type")
        )
        object.__setattr__(
            self,
            "production_account_type",
            _coerce_account_type(self.production_account_type, "production_account_type"),
        )

        if self.timeout is not None and self.timeout <= 0:
            raise TradierConfigurationError("timeout must be positive")

    @property
    def is_production(self) -> bool:
        """True when requests are routed to the production host."""
        return self.account_type == self.production_account_type

    @classmethod
    def from_env(cls) -> "TradierConfig":
        """
        Load configuration from environment variables.

        Required environment variables:
            TRADIER_ACCESS_TOKEN: OAuth bearer token

        Optional environment variables:
            TRADIER_ACCOUNT_TYPE: sandbox, api or brokerage (default: sandbox)
            TRADIER_PRODUCTION_ACCOUNT_TYPE: account type treated as
                production (default: api)
            TRADIER_TIMEOUT: request timeout in seconds

        Returns:
            TradierConfig instance

        Raises:
            TradierConfigurationError: If the token is missing or a value is invalid
        """
        access_token = os.getenv("TRADIER_ACCESS_TOKEN")
        if not access_token:
            raise TradierConfigurationError(
                "TRADIER_ACCESS_TOKEN environment variable not set. "
                "Create a token at https://dash.tradier.com/settings/api"
            )

        timeout_raw = os.getenv("TRADIER_TIMEOUT")
        timeout: Optional[float] = None
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                raise TradierConfigurationError(
                    f"TRADIER_TIMEOUT must be a number, got {timeout_raw!r}"
                ) from None

        return cls(
            access_token=access_token,
            account_type=os.getenv("TRADIER_ACCOUNT_TYPE", AccountType.SANDBOX.value),
            production_account_type=os.getenv(
                "TRADIER_PRODUCTION_ACCOUNT_TYPE", PRODUCTION_ACCOUNT_TYPE.value
            ),
            timeout=timeout,
        )
