"""
Exception classes for the checkout demo.

Every exception carries an error code and a message that is safe to show
on the console. The menu loop reports problems as text and never lets one
of these reach the user.
"""

from typing import Any, Dict, Optional


class CheckoutError(Exception):
    """Base exception for all checkout errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        user_message: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.user_message = user_message or "Something went wrong during checkout."
        self.metadata = kwargs

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for reporting"""
        return {
            "error": {
                "code": self.error_code,
                "message": self.user_message,
                "type": self.__class__.__name__,
            }
        }


class InvalidSelectionError(CheckoutError):
    """Raised when menu input does not match any known option."""

    def __init__(self, raw: str, **kwargs):
        super().__init__(
            message=f"Unrecognised menu selection: {raw!r}",
            error_code="invalid_selection",
            user_message="Invalid option. Please choose 1, 2, 3, 4, or 0.",
            raw=raw,
            **kwargs
        )
        self.raw = raw


class GatewayConfigurationError(CheckoutError):
    """
    A gateway reached the abstract create_processor().

    Concrete gateways always override it, so this only fires when a
    subclass delegates to the base implementation through super().
    """

    def __init__(self, gateway_name: str, **kwargs):
        super().__init__(
            message=f"{gateway_name}.create_processor() must be implemented by subclass",
            error_code="gateway_not_configured",
            user_message="This payment method is not available.",
            gateway=gateway_name,
            **kwargs
        )
        self.gateway_name = gateway_name
