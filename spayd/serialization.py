"""Descriptor serialization for payment records."""

from typing import Any

from spayd.models.enums import NotifyType
from spayd.models.payment import Payment, PaymentType

HEADER = "SPD"
VERSION = "1.0"
DELIMITER = "*"

# Field name -> descriptor key, in canonical output order.
KEYS = {
    "account": "ACC",
    "amount": "AM",
    "currency": "CC",
    "reference": "RF",
    "recipient": "RN",
    "date": "DT",
    "payment_type": "PT",
    "message": "MSG",
    "notify": "NT",
    "notify_address": "NTA",
}


def serialize_value(value: Any) -> str:
    """Map a field value to its descriptor text."""
    if isinstance(value, PaymentType):
        return value.code
    if isinstance(value, NotifyType):
        return value.value
    return str(value)


def serialize(payment: Payment) -> str:
    """Build the descriptor string without validating ``payment``.

    Absent optional fields are left out entirely. Values are written
    verbatim; a ``*`` inside a value is not escaped.
    """
    tokens = [HEADER, VERSION]
    for name, key in KEYS.items():
        value = getattr(payment, name)
        if value is not None:
            tokens.append(f"{key}:{serialize_value(value)}")
    return DELIMITER.join(tokens)


def to_dict(payment: Payment) -> dict[str, str]:
    """Present fields as a JSON-ready dict keyed by field name."""
    return {
        name: serialize_value(getattr(payment, name))
        for name in KEYS
        if getattr(payment, name) is not None
    }
