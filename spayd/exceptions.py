"""Custom exception hierarchy for spayd."""


class SpaydError(Exception):
    """Base exception for all spayd errors.

    Field errors carry the name of the offending field and a static,
    human-readable reason. ``str(err)`` is the reason.
    """

    field: str | None = None

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpaydError):
            return NotImplemented
        return type(self) is type(other) and self.reason == other.reason

    def __hash__(self) -> int:
        return hash((type(self), self.reason))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reason!r})"


class InvalidAccountNumber(SpaydError):
    """Raised when the account is not IBAN-shaped."""

    field = "account"


class InvalidAmount(SpaydError):
    """Raised when the amount is too long or not a decimal literal."""

    field = "amount"


class InvalidCurrency(SpaydError):
    """Raised when the currency is not an ISO 4217 alphabetic code."""

    field = "currency"


class InvalidReference(SpaydError):
    """Raised when the reference is too long or not digits only."""

    field = "reference"


class InvalidRecipient(SpaydError):
    """Raised when the recipient is too long or has forbidden characters."""

    field = "recipient"


class InvalidDate(SpaydError):
    """Raised when the date is not YYYYMMDD."""

    field = "date"


class InvalidPaymentType(SpaydError):
    """Raised when a custom payment type code is malformed."""

    field = "payment_type"


class InvalidMessage(SpaydError):
    """Raised when the message is too long or has forbidden characters."""

    field = "message"


class InvalidNotifyAddress(SpaydError):
    """Raised when the notify address is malformed or has no notify type."""

    field = "notify_address"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""
