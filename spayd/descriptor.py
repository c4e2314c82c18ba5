"""Safe and unchecked descriptor generation."""

from spayd.models.payment import Payment
from spayd.serialization import serialize
from spayd.validation import validate


def spayd_string(payment: Payment) -> str:
    """Validate ``payment`` and return its descriptor.

    Raises
    ------
    SpaydError
        First invalid field; no descriptor is produced.
    """
    validate(payment)
    return serialize(payment)


def spayd_string_unchecked(payment: Payment) -> str:
    """Return the descriptor without validation.

    Malformed values reach the output as-is and may be rejected by the
    bank's QR reader.
    """
    return serialize(payment)
