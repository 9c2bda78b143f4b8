"""
Payment gateways - the creators of the checkout factory.

A gateway knows which processor it builds; checkout code only ever talks to
the PaymentGateway abstraction and never names a concrete processor.

Example:
    run_checkout(PayPalGateway())  # prints "Processing $50.00 via PayPal"
"""

from abc import ABC, abstractmethod
from typing import Optional, Type

from rich.console import Console

from checkout.config import Config
from checkout.exceptions import GatewayConfigurationError
from checkout.logger import get_logger
from checkout.processors import (
    Amount,
    BitcoinProcessor,
    CreditCardProcessor,
    PaymentProcessor,
    PayPalProcessor,
)

logger = get_logger(__name__)

DEMO_AMOUNT = Config.DEMO_AMOUNT


class PaymentGateway(ABC):
    """
    Creator side of the factory method.

    Subclasses override create_processor(); execute_payment() is shared and
    works with whatever processor the subclass builds.
    """

    display_name: str = ""

    def __init__(self, console: Optional[Console] = None):
        self.console = console

    @abstractmethod
    def create_processor(self) -> PaymentProcessor:
        """Build a new processor for this gateway."""
        raise GatewayConfigurationError(self.__class__.__name__)

    def execute_payment(self, amount: Amount) -> None:
        """Create a processor and let it process `amount`."""
        processor = self.create_processor()
        logger.debug(
            "processor_created",
            gateway=self.__class__.__name__,
            processor=processor.__class__.__name__,
        )
        processor.process(amount)


class _BoundGateway(PaymentGateway):
    """Gateway whose product is fixed by the processor_class attribute."""

    processor_class: Type[PaymentProcessor]

    def create_processor(self) -> PaymentProcessor:
        return self.processor_class(console=self.console)


class CreditCardGateway(_BoundGateway):
    display_name = "Credit Card"
    processor_class = CreditCardProcessor


class PayPalGateway(_BoundGateway):
    display_name = "PayPal"
    processor_class = PayPalProcessor


class BitcoinGateway(_BoundGateway):
    display_name = "Bitcoin"
    processor_class = BitcoinProcessor


def run_checkout(gateway: PaymentGateway, amount: Amount = DEMO_AMOUNT) -> None:
    """Client code: pay `amount` through any gateway."""
    logger.info("checkout_started", gateway=gateway.__class__.__name__)
    gateway.execute_payment(amount)
