"""Tests for safe and unchecked descriptor generation."""

import dataclasses

import pytest

from spayd import (
    InvalidAccountNumber,
    InvalidAmount,
    InvalidNotifyAddress,
    InvalidRecipient,
    InvalidReference,
    NotifyType,
    Payment,
    spayd_string,
    spayd_string_unchecked,
)


class TestSpaydString:
    """Tests for the validating path."""

    def test_basic(self, account: str, amount: str) -> None:
        payment = Payment.builder(account, amount).build()

        assert payment.spayd_string() == "SPD*1.0*ACC:CZ5508000000001234567899*AM:239.50"

    def test_invalid_account(self, amount: str) -> None:
        payment = Payment.builder("C1Z7955000000001027699338", amount).build()

        with pytest.raises(InvalidAccountNumber) as exc_info:
            payment.spayd_string()
        assert exc_info.value == InvalidAccountNumber("Value is not a valid IBAN")

    def test_invalid_amount(self, account: str) -> None:
        payment = Payment.builder(account, "239.500").build()

        with pytest.raises(InvalidAmount) as exc_info:
            spayd_string(payment)
        assert exc_info.value.reason == (
            "Value is not in a decimal format. Maximum number of decimal places is 2."
        )

    def test_reference(self, account: str, amount: str) -> None:
        payment = Payment.builder(account, amount).reference("123121").build()

        assert spayd_string(payment) == (
            "SPD*1.0*ACC:CZ5508000000001234567899*AM:239.50*RF:123121"
        )

    def test_invalid_reference(self, account: str, amount: str) -> None:
        payment = Payment.builder(account, amount).reference("123121123A").build()

        with pytest.raises(InvalidReference) as exc_info:
            spayd_string(payment)
        assert exc_info.value.reason == "Value contains non-digit characters"

    def test_recipient(self, account: str, amount: str) -> None:
        payment = Payment.builder(account, amount).recipient("MISTR1/+.% PO:").build()

        assert spayd_string(payment) == (
            "SPD*1.0*ACC:CZ5508000000001234567899*AM:239.50*RN:MISTR1/+.% PO:"
        )

    def test_invalid_recipient(self, account: str, amount: str) -> None:
        payment = Payment.builder(account, amount).recipient("MISTR1/+*.% PO:").build()

        with pytest.raises(InvalidRecipient) as exc_info:
            spayd_string(payment)
        assert exc_info.value.reason == "Value contains forbidden character(s)"

    def test_full(self, full_payment: Payment, full_descriptor: str) -> None:
        assert full_payment.spayd_string() == full_descriptor

    def test_notify_address_without_notify(self, basic_payment: Payment) -> None:
        payment = dataclasses.replace(basic_payment, notify_address="email@example.com")

        with pytest.raises(InvalidNotifyAddress) as exc_info:
            spayd_string(payment)
        assert exc_info.value.reason == "Notify type was not provided"

    def test_invalid_email(self, basic_payment: Payment) -> None:
        payment = dataclasses.replace(
            basic_payment, notify=NotifyType.EMAIL, notify_address="not-an-email"
        )

        with pytest.raises(InvalidNotifyAddress) as exc_info:
            spayd_string(payment)
        assert exc_info.value.reason == "Invalid email address"


class TestSpaydStringUnchecked:
    """Tests for the unchecked path."""

    def test_matches_safe_path_for_valid_payment(self, full_payment: Payment) -> None:
        assert spayd_string_unchecked(full_payment) == spayd_string(full_payment)

    def test_invalid_data_reaches_output(self, amount: str) -> None:
        payment = Payment.builder("C1Z7955000000001027699338", amount).message("hi").build()

        assert payment.spayd_string_unchecked() == (
            "SPD*1.0*ACC:C1Z7955000000001027699338*AM:239.50*MSG:hi"
        )
