"""Fluent builder for payment records."""

from __future__ import annotations

from typing import Any

from spayd.models.enums import NotifyType
from spayd.models.payment import Payment, PaymentType


class PaymentBuilder:
    """Accumulate payment fields and produce an immutable :class:`Payment`.

    The mandatory fields are constructor arguments, so a builder can
    never finish without them. Optional setters return the builder and
    may be called in any order; setting a field twice keeps the last
    value. No content is validated here.

    Parameters
    ----------
    account : str
        Recipient account in IBAN form.
    amount : str
        Decimal literal, e.g. ``"239.50"``.
    """

    def __init__(self, account: str, amount: str) -> None:
        self._fields: dict[str, Any] = {"account": account, "amount": amount}

    def currency(self, value: str) -> PaymentBuilder:
        return self._set("currency", value)

    def reference(self, value: str) -> PaymentBuilder:
        return self._set("reference", value)

    def recipient(self, value: str) -> PaymentBuilder:
        return self._set("recipient", value)

    def date(self, value: str) -> PaymentBuilder:
        return self._set("date", value)

    def payment_type(self, value: PaymentType) -> PaymentBuilder:
        return self._set("payment_type", value)

    def message(self, value: str) -> PaymentBuilder:
        return self._set("message", value)

    def notify(self, value: NotifyType) -> PaymentBuilder:
        return self._set("notify", value)

    def notify_address(self, value: str) -> PaymentBuilder:
        return self._set("notify_address", value)

    def build(self) -> Payment:
        """Return a new payment; the builder stays reusable."""
        return Payment(**self._fields)

    def _set(self, name: str, value: Any) -> PaymentBuilder:
        self._fields[name] = value
        return self
