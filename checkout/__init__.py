"""
Global Checkout System

A command-line demonstration of the Factory Method pattern: payment
gateways (creators) build payment processors (products), and checkout code
only ever depends on the gateway abstraction.

Components:
- Processors: credit card, PayPal and bitcoin payment simulations
- Gateways: one creator per processor, plus the shared checkout runner
- Interfaces: structural "does it look like a processor?" check
- Menu: interactive loop driving the demo
"""

__version__ = "0.1.0"

from checkout.gateways import (
    BitcoinGateway,
    CreditCardGateway,
    PaymentGateway,
    PayPalGateway,
    run_checkout,
)
from checkout.interfaces import PAYMENT_PROCESSOR_INTERFACE, implements_interface
from checkout.processors import (
    BitcoinProcessor,
    CreditCardProcessor,
    PaymentProcessor,
    PayPalProcessor,
)

__all__ = [
    "BitcoinGateway",
    "BitcoinProcessor",
    "CreditCardGateway",
    "CreditCardProcessor",
    "PAYMENT_PROCESSOR_INTERFACE",
    "PaymentGateway",
    "PaymentProcessor",
    "PayPalGateway",
    "PayPalProcessor",
    "implements_interface",
    "run_checkout",
]
