"""Pytest configuration and fixtures."""

import pytest

from spayd import NotifyType, Payment, PaymentType


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def account() -> str:
    """Valid IBAN-shaped account."""
    return "CZ5508000000001234567899"


@pytest.fixture
def amount() -> str:
    """Valid amount literal."""
    return "239.50"


@pytest.fixture
def basic_payment(account: str, amount: str) -> Payment:
    """Payment with only the mandatory fields."""
    return Payment(account, amount)


@pytest.fixture
def full_payment(account: str, amount: str) -> Payment:
    """Payment with every field set to a valid value."""
    return (
        Payment.builder(account, amount)
        .currency("CZK")
        .reference("123121")
        .recipient("MISTR1/+.% PO:")
        .date("20230810")
        .payment_type(PaymentType.instant())
        .message("PAYMENT")
        .notify(NotifyType.EMAIL)
        .notify_address("email@example.com")
        .build()
    )


FULL_DESCRIPTOR = (
    "SPD*1.0*ACC:CZ5508000000001234567899*AM:239.50*CC:CZK*RF:123121"
    "*RN:MISTR1/+.% PO:*DT:20230810*PT:IP*MSG:PAYMENT*NT:E*NTA:email@example.com"
)


@pytest.fixture
def full_descriptor() -> str:
    """Expected descriptor of ``full_payment``."""
    return FULL_DESCRIPTOR
