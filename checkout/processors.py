"""
Payment processors - the products of the checkout factory.

Each processor simulates a payment by printing one line naming the payment
method and the amount. Nothing is charged and nothing is stored.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

from rich.console import Console

from checkout.config import Config
from checkout.logger import get_logger

logger = get_logger(__name__)

Amount = Union[Decimal, int, float, str]

_CENTS = Decimal("0.01")


def format_amount(amount: Amount) -> str:
    """
    Format an amount with the currency symbol and exactly two decimals.

    Negative amounts are not rejected: format_amount(-5) == "$-5.00".
    Floats are converted through their repr and rounded half up, so
    format_amount(1.005) == "$1.01" where a binary rounding would give
    "$1.00". Precision grows with the amount, so large values never fail.
    """
    value = Decimal(str(amount))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{Config.CURRENCY_SYMBOL}{value}"


class PaymentProcessor(ABC):
    """Interface every payment processor implements."""

    display_name: str = ""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    @abstractmethod
    def process(self, amount: Amount) -> None:
        """
        Simulate processing a payment.

        Args:
            amount: Amount to charge. Not validated; negative values are
                printed as-is.
        """

    def _emit(self, line: str, amount: Amount) -> None:
        self.console.print(line, markup=False, highlight=False, soft_wrap=True)
        logger.debug(
            "payment_processed",
            processor=self.__class__.__name__,
            amount=format_amount(amount),
        )


class CreditCardProcessor(PaymentProcessor):
    display_name = "Credit Card"

    def process(self, amount: Amount) -> None:
        self._emit(f"Processing {format_amount(amount)} via {self.display_name}", amount)


class PayPalProcessor(PaymentProcessor):
    display_name = "PayPal"

    def process(self, amount: Amount) -> None:
        self._emit(f"Processing {format_amount(amount)} via {self.display_name}", amount)


class BitcoinProcessor(PaymentProcessor):
    display_name = "Bitcoin"

    def process(self, amount: Amount) -> None:
        self._emit(
            f"Aha! You're using {self.display_name}! "
            f"Processing {format_amount(amount)} via {self.display_name}",
            amount,
        )
