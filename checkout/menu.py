"""Interactive checkout menu.

Reads one line at a time, maps it to a Selection and runs the matching
checkouts. The loop is a small state machine:

    AWAITING_INPUT --line--> DISPATCHING --any option but 0--> AWAITING_INPUT
                                         --0-------------> TERMINATED
"""

import sys
from enum import Enum
from typing import Dict, Optional, TextIO, Tuple, Type

from rich.console import Console

from checkout.exceptions import InvalidSelectionError
from checkout.gateways import (
    DEMO_AMOUNT,
    BitcoinGateway,
    CreditCardGateway,
    PaymentGateway,
    PayPalGateway,
    run_checkout,
)
from checkout.interfaces import (
    PAYMENT_PROCESSOR_INTERFACE,
    implements_interface,
    interface_name,
)
from checkout.logger import get_logger
from checkout.processors import (
    Amount,
    BitcoinProcessor,
    CreditCardProcessor,
    PaymentProcessor,
    PayPalProcessor,
)

logger = get_logger(__name__)

MENU_BANNER = (
    "[bold]--- Global Checkout System ---[/bold]\n"
    "\n"
    "Choose a checkout option:\n"
    "\n"
    "1. Test Credit Card (cc)\n"
    "2. Test PayPal (paypal)\n"
    "3. Test Bitcoin (btc)\n"
    "4. Test All\n"
    "0. Exit\n"
    "Type 1, 2, 3, 4, or 0 and press ENTER.\n"
)
PROMPT = "Option: "
FAREWELL = "Goodbye! Salamat Shapi"
INVALID_OPTION = "Invalid option. Please choose 1, 2, 3, 4, or 0."


class Selection(Enum):
    """Menu options, keyed by the token the user types."""
    CREDIT_CARD = "1"
    PAYPAL = "2"
    BITCOIN = "3"
    ALL = "4"
    EXIT = "0"
    INVALID = "invalid"

    @classmethod
    def from_input(cls, raw: str, strict: bool = False) -> "Selection":
        """
        Map raw input to a Selection after trimming whitespace.

        Args:
            raw: Line as typed, possibly with surrounding whitespace.
            strict: Raise InvalidSelectionError instead of returning INVALID.
        """
        token = raw.strip()
        for selection in cls:
            if selection is not cls.INVALID and selection.value == token:
                return selection
        if strict:
            raise InvalidSelectionError(raw)
        return cls.INVALID


class MenuState(Enum):
    AWAITING_INPUT = "awaiting_input"
    DISPATCHING = "dispatching"
    TERMINATED = "terminated"


# Gateways to run, in order, and the processor to capability-check afterwards
CHECKOUT_PLAN: Dict[Selection, Tuple[Tuple[Type[PaymentGateway], ...], Type[PaymentProcessor]]] = {
    Selection.CREDIT_CARD: ((CreditCardGateway,), CreditCardProcessor),
    Selection.PAYPAL: ((PayPalGateway,), PayPalProcessor),
    Selection.BITCOIN: ((BitcoinGateway,), BitcoinProcessor),
    Selection.ALL: (
        (CreditCardGateway, PayPalGateway, BitcoinGateway),
        CreditCardProcessor,
    ),
}


def parse_selection(raw: str) -> Selection:
    """Map a line of input to a Selection; unknown input maps to INVALID."""
    return Selection.from_input(raw)


class CheckoutMenu:
    """Menu loop over an input stream and a rich console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        amount: Amount = DEMO_AMOUNT,
    ):
        """Initialize the menu.

        Args:
            console: Where output goes. Defaults to stdout.
            stdin: Where lines are read from. Defaults to sys.stdin.
            amount: Amount charged by every checkout.
        """
        self.console = console or Console(highlight=False)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.amount = amount
        self.state = MenuState.AWAITING_INPUT

    def show_menu(self) -> None:
        self.console.print(MENU_BANNER)

    def read_line(self) -> Optional[str]:
        """Prompt and read one line. Returns None at end of input."""
        self.console.print(PROMPT, end="", markup=False)
        line = self.stdin.readline()
        if line == "":
            return None
        return line

    def check_interface(self, processor_class: Type[PaymentProcessor]) -> bool:
        """Print whether a fresh `processor_class` instance looks like a processor."""
        processor = processor_class(console=self.console)
        result = implements_interface(processor, PAYMENT_PROCESSOR_INTERFACE)
        self.console.print("\n--- Interface check ---", markup=False)
        self.console.print(
            f"{processor_class.__name__} implements "
            f"{interface_name(PAYMENT_PROCESSOR_INTERFACE)}: {result}",
            markup=False,
        )
        return result

    def handle_selection(self, raw: str) -> bool:
        """
        Dispatch one line of input.

        Returns:
            False once the user chose to exit, True otherwise.
        """
        self.state = MenuState.DISPATCHING
        selection = parse_selection(raw)
        logger.info("menu_selection", selection=selection.name)

        if selection is Selection.EXIT:
            self.console.print(f"[green]{FAREWELL}[/green]")
            self.state = MenuState.TERMINATED
            logger.info("menu_terminated", reason="exit")
            return False

        if selection is Selection.INVALID:
            logger.info("menu_invalid_selection", raw=raw.strip())
            self.console.print(f"[yellow]{INVALID_OPTION}[/yellow]")
            self.state = MenuState.AWAITING_INPUT
            return True

        gateways, checked_processor = CHECKOUT_PLAN[selection]
        for gateway_class in gateways:
            self.console.print(
                f"\nCheckout with {gateway_class.display_name} gateway:",
                markup=False,
            )
            run_checkout(gateway_class(console=self.console), self.amount)
        self.check_interface(checked_processor)

        self.state = MenuState.AWAITING_INPUT
        return True

    def run(self) -> int:
        """
        Run the loop until the user exits or input runs out.

        Returns:
            Number of lines dispatched.
        """
        dispatched = 0
        while self.state is not MenuState.TERMINATED:
            self.show_menu()
            raw = self.read_line()
            if raw is None:
                self.console.print()
                self.state = MenuState.TERMINATED
                logger.info("menu_terminated", reason="eof")
                break
            dispatched += 1
            self.handle_selection(raw)
        return dispatched
