"""Tests for the payment gateways (creators)."""

from decimal import Decimal

import pytest

from checkout.exceptions import GatewayConfigurationError
from checkout.gateways import (
    DEMO_AMOUNT,
    BitcoinGateway,
    CreditCardGateway,
    PaymentGateway,
    PayPalGateway,
    run_checkout,
)
from checkout.processors import (
    BitcoinProcessor,
    CreditCardProcessor,
    PayPalProcessor,
)


class TestGateways:
    """Test cases for the concrete gateways."""

    @pytest.mark.parametrize(
        "gateway_class, processor_class, marker",
        [
            (CreditCardGateway, CreditCardProcessor, "Credit Card"),
            (PayPalGateway, PayPalProcessor, "PayPal"),
            (BitcoinGateway, BitcoinProcessor, "Bitcoin"),
        ],
    )
    def test_create_processor_matches_gateway(
        self, console, gateway_class, processor_class, marker
    ):
        """Test each gateway builds the processor of its own variant."""
        processor = gateway_class(console=console).create_processor()
        processor.process(Decimal("50"))

        assert type(processor) is processor_class
        assert f"via {marker}" in console.text

    def test_create_processor_returns_new_instance(self, console):
        """Test processors are not shared between calls."""
        gateway = PayPalGateway(console=console)

        assert gateway.create_processor() is not gateway.create_processor()

    def test_execute_payment_processes_amount(self, console):
        """Test execute_payment() creates a processor and runs it."""
        CreditCardGateway(console=console).execute_payment(Decimal("12.30"))

        assert console.lines == ["Processing $12.30 via Credit Card"]

    def test_execute_payment_uses_factory_method(self, console):
        """Test a custom gateway only needs to override create_processor()."""
        created = []

        class RecordingGateway(PaymentGateway):
            def create_processor(self):
                processor = BitcoinProcessor(console=console)
                created.append(processor)
                return processor

        RecordingGateway().execute_payment(3)

        assert len(created) == 1
        assert "Processing $3.00 via Bitcoin" in console.text


class TestAbstractGateway:
    """Test cases for the PaymentGateway contract."""

    def test_base_gateway_is_abstract(self):
        """Test PaymentGateway cannot be instantiated."""
        with pytest.raises(TypeError):
            PaymentGateway()

    def test_missing_create_processor_is_rejected(self):
        """Test a gateway without create_processor() fails at instantiation."""

        class Incomplete(PaymentGateway):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_super_create_processor_raises_configuration_error(self):
        """Test delegating to the base create_processor() is a configuration error."""

        class Delegating(PaymentGateway):
            def create_processor(self):
                return super().create_processor()

        with pytest.raises(GatewayConfigurationError) as exc_info:
            Delegating().execute_payment(1)

        assert exc_info.value.gateway_name == "Delegating"
        assert exc_info.value.to_dict()["error"]["code"] == "gateway_not_configured"


class TestRunCheckout:
    """Test cases for run_checkout."""

    def test_default_amount_is_demo_amount(self, console):
        """Test the client charges 50.00 unless told otherwise."""
        run_checkout(PayPalGateway(console=console))

        assert DEMO_AMOUNT == Decimal("50.00")
        assert console.lines == ["Processing $50.00 via PayPal"]

    def test_explicit_amount(self, console):
        """Test the client forwards an explicit amount."""
        run_checkout(BitcoinGateway(console=console), 0.5)

        assert console.lines == [
            "Aha! You're using Bitcoin! Processing $0.50 via Bitcoin"
        ]
