"""Enumeration types for payment descriptor fields."""

from enum import Enum


class PaymentKind(str, Enum):
    INSTANT = "INSTANT"
    OTHER = "OTHER"


class NotifyType(str, Enum):
    """Channel the recipient's bank uses to notify about the payment.

    Values are the descriptor codes written after ``NT:``.
    """

    PHONE = "P"
    EMAIL = "E"
