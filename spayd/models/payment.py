"""Payment record model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from spayd.models.enums import NotifyType, PaymentKind

if TYPE_CHECKING:
    from spayd.builder import PaymentBuilder


@dataclass(frozen=True)
class PaymentType:
    """Payment type written after ``PT:``.

    Either an instant payment (``IP``) or a bank-specific code of at
    most 3 characters. Build with :meth:`instant` or :meth:`other`.
    """

    kind: PaymentKind
    custom_code: str = ""

    INSTANT_CODE: ClassVar[str] = "IP"

    def __post_init__(self) -> None:
        # Only the variant shape is enforced here; length and charset of a
        # custom code are left to the validator.
        kind = PaymentKind(self.kind)
        object.__setattr__(self, "kind", kind)
        if kind is PaymentKind.INSTANT and self.custom_code:
            raise ValueError("Instant payment type takes no custom code")
        if kind is PaymentKind.OTHER and not self.custom_code:
            raise ValueError("Other payment type requires a custom code")

    @classmethod
    def instant(cls) -> PaymentType:
        return cls(PaymentKind.INSTANT)

    @classmethod
    def other(cls, code: str) -> PaymentType:
        return cls(PaymentKind.OTHER, code)

    @property
    def is_instant(self) -> bool:
        return self.kind is PaymentKind.INSTANT

    @property
    def code(self) -> str:
        """Descriptor code, ``IP`` or the custom code verbatim."""
        if self.is_instant:
            return self.INSTANT_CODE
        return self.custom_code


@dataclass(frozen=True)
class Payment:
    """Short Payment Descriptor record.

    ``account`` (IBAN) and ``amount`` (decimal literal kept as text so
    formatting such as ``"239.50"`` survives) are mandatory; everything
    else is optional and omitted from the descriptor when ``None``.
    Nothing is checked on construction: see :func:`spayd.validation.validate`.
    """

    account: str
    amount: str
    currency: str | None = None  # ISO 4217, e.g. CZK
    reference: str | None = None  # digits only, max 16
    recipient: str | None = None
    date: str | None = None  # YYYYMMDD
    payment_type: PaymentType | None = None
    message: str | None = None
    notify: NotifyType | None = None
    notify_address: str | None = None  # phone or email, depends on notify

    @classmethod
    def builder(cls, account: str, amount: str) -> PaymentBuilder:
        """Start a fluent builder with the two mandatory fields."""
        from spayd.builder import PaymentBuilder

        return PaymentBuilder(account, amount)

    def spayd_string(self) -> str:
        """Validate and serialize; raises the first field error."""
        from spayd.descriptor import spayd_string

        return spayd_string(self)

    def spayd_string_unchecked(self) -> str:
        """Serialize without validation."""
        from spayd.descriptor import spayd_string_unchecked

        return spayd_string_unchecked(self)
