"""Field validation for payment records.

Checks run in descriptor order and stop at the first failure. Patterns
are compiled once at import and only read afterwards, so validation is
safe to run from several threads at once.
"""

import re

from spayd.currency import is_currency_code
from spayd.exceptions import (
    InvalidAccountNumber,
    InvalidAmount,
    InvalidCurrency,
    InvalidDate,
    InvalidMessage,
    InvalidNotifyAddress,
    InvalidPaymentType,
    InvalidRecipient,
    InvalidReference,
    SpaydError,
)
from spayd.models.enums import NotifyType
from spayd.models.payment import Payment, PaymentType

IBAN_PATTERN = re.compile(r"[A-Z]{2}\d{2}[0-9A-Z]{1,30}", re.ASCII)
AMOUNT_PATTERN = re.compile(r"\d+(\.\d{1,2})?", re.ASCII)
DIGITS_PATTERN = re.compile(r"[0-9]+")
ALLOWED_CHARS_PATTERN = re.compile(r"[0-9A-Z $%+\-./:]+")
DATE_PATTERN = re.compile(r"[12]\d{3}(0[1-9]|1[0-2])(0[1-9]|[12]\d|3[01])", re.ASCII)
PHONE_PATTERN = re.compile(r"\+?\d+", re.ASCII)
# Simplified heuristic, matched against the start of the address only.
EMAIL_PATTERN = re.compile(
    r"([a-z0-9_+]([a-z0-9_+.]*[a-z0-9_+])?)@([a-z0-9]+([\-.][a-z0-9]+)*\.[a-z]{2,6})"
)

MAX_AMOUNT_LENGTH = 10
MAX_REFERENCE_LENGTH = 16
MAX_RECIPIENT_LENGTH = 35
MAX_PAYMENT_TYPE_LENGTH = 3
MAX_MESSAGE_LENGTH = 60
MAX_NOTIFY_ADDRESS_LENGTH = 320

FORBIDDEN_CHARS = "Value contains forbidden character(s)"


def _too_long(limit: int) -> str:
    return f"Exceeded maximum length of {limit} characters"


def validate(payment: Payment) -> None:
    """Check every present field of ``payment``.

    Parameters
    ----------
    payment : Payment
        Record to inspect. It is never modified.

    Raises
    ------
    SpaydError
        The field error of the first failing field, in the order
        account, amount, currency, reference, recipient, date,
        payment type, message, notify address.
    """
    if not IBAN_PATTERN.fullmatch(payment.account):
        raise InvalidAccountNumber("Value is not a valid IBAN")

    if len(payment.amount) > MAX_AMOUNT_LENGTH:
        raise InvalidAmount(_too_long(MAX_AMOUNT_LENGTH))
    if not AMOUNT_PATTERN.fullmatch(payment.amount):
        raise InvalidAmount(
            "Value is not in a decimal format. Maximum number of decimal places is 2."
        )

    if payment.currency is not None and not is_currency_code(payment.currency):
        raise InvalidCurrency("Invalid currency code")

    if payment.reference is not None:
        if len(payment.reference) > MAX_REFERENCE_LENGTH:
            raise InvalidReference(_too_long(MAX_REFERENCE_LENGTH))
        if not DIGITS_PATTERN.fullmatch(payment.reference):
            raise InvalidReference("Value contains non-digit characters")

    if payment.recipient is not None:
        if len(payment.recipient) > MAX_RECIPIENT_LENGTH:
            raise InvalidRecipient(_too_long(MAX_RECIPIENT_LENGTH))
        if not ALLOWED_CHARS_PATTERN.fullmatch(payment.recipient):
            raise InvalidRecipient(FORBIDDEN_CHARS)

    if payment.date is not None and not DATE_PATTERN.fullmatch(payment.date):
        raise InvalidDate("Date is not in YYYYMMDD format")

    payment_type = payment.payment_type
    if payment_type is not None:
        if not isinstance(payment_type, PaymentType):
            raise InvalidPaymentType("Value is not a payment type")
        if not payment_type.is_instant:
            if len(payment_type.custom_code) > MAX_PAYMENT_TYPE_LENGTH:
                raise InvalidPaymentType(_too_long(MAX_PAYMENT_TYPE_LENGTH))
            if not ALLOWED_CHARS_PATTERN.fullmatch(payment_type.custom_code):
                raise InvalidPaymentType(FORBIDDEN_CHARS)

    if payment.message is not None:
        if len(payment.message) > MAX_MESSAGE_LENGTH:
            raise InvalidMessage(_too_long(MAX_MESSAGE_LENGTH))
        if not ALLOWED_CHARS_PATTERN.fullmatch(payment.message):
            raise InvalidMessage(FORBIDDEN_CHARS)

    # notify is only checked for being a known code; the address depends on it
    notify = _notify_type(payment.notify)
    if payment.notify_address is not None:
        _validate_notify_address(payment.notify_address, notify)


def _notify_type(value: object) -> NotifyType | None:
    """Coerce a raw code such as ``"E"`` to its member."""
    if value is None:
        return None
    try:
        return NotifyType(value)
    except ValueError:
        raise InvalidNotifyAddress("Invalid notify type") from None


def _validate_notify_address(address: str, notify: NotifyType | None) -> None:
    if len(address) > MAX_NOTIFY_ADDRESS_LENGTH:
        raise InvalidNotifyAddress(_too_long(MAX_NOTIFY_ADDRESS_LENGTH))
    if notify is None:
        raise InvalidNotifyAddress("Notify type was not provided")
    if notify is NotifyType.PHONE:
        if not PHONE_PATTERN.fullmatch(address):
            raise InvalidNotifyAddress("Invalid phone number")
    elif not EMAIL_PATTERN.match(address):
        raise InvalidNotifyAddress("Invalid email address")


def is_valid(payment: Payment) -> bool:
    """Return True if :func:`validate` accepts ``payment``."""
    try:
        validate(payment)
    except SpaydError:
        return False
    return True
