"""Payment descriptor models."""

from spayd.models.enums import NotifyType, PaymentKind
from spayd.models.payment import Payment, PaymentType

__all__ = ["NotifyType", "Payment", "PaymentKind", "PaymentType"]
