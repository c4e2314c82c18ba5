"""Short Payment Descriptor (SPAYD) generation and validation.

Example::

    payment = (
        Payment.builder("CZ7907000000001234567890", "239.50")
        .currency("CZK")
        .build()
    )
    payment.spayd_string()  # "SPD*1.0*ACC:CZ7907000000001234567890*AM:239.50*CC:CZK"
"""

__version__ = "0.1.0"

from spayd.builder import PaymentBuilder
from spayd.descriptor import spayd_string, spayd_string_unchecked
from spayd.exceptions import (
    ConfigurationError,
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
from spayd.models import NotifyType, Payment, PaymentKind, PaymentType
from spayd.serialization import serialize
from spayd.validation import is_valid, validate

__all__ = [
    "__version__",
    "ConfigurationError",
    "InvalidAccountNumber",
    "InvalidAmount",
    "InvalidCurrency",
    "InvalidDate",
    "InvalidMessage",
    "InvalidNotifyAddress",
    "InvalidPaymentType",
    "InvalidRecipient",
    "InvalidReference",
    "NotifyType",
    "Payment",
    "PaymentBuilder",
    "PaymentKind",
    "PaymentType",
    "SpaydError",
    "is_valid",
    "serialize",
    "spayd_string",
    "spayd_string_unchecked",
    "validate",
]
