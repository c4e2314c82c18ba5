"""Payment generator producing valid sample records."""

from __future__ import annotations

import random
import unicodedata
from typing import Iterator

from spayd.generators.base import BaseGenerator
from spayd.logging import get_logger, log_fields
from spayd.models import NotifyType, Payment, PaymentType
from spayd.validation import (
    ALLOWED_CHARS_PATTERN,
    MAX_MESSAGE_LENGTH,
    MAX_RECIPIENT_LENGTH,
)

logger = get_logger(__name__)


def to_descriptor_text(text: str, limit: int, fallback: str) -> str:
    """Fold ``text`` into the descriptor charset and cut it to ``limit``.

    Diacritics are stripped, letters uppercased and any remaining
    character outside ``[0-9A-Z $%+-./:]`` dropped.
    """
    ascii_text = (
        unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii").upper()
    )
    kept = "".join(ch for ch in ascii_text if ALLOWED_CHARS_PATTERN.fullmatch(ch))
    kept = " ".join(kept.split())[:limit].strip()
    return kept or fallback


class PaymentGenerator(BaseGenerator):
    """Generate payments that pass :func:`spayd.validation.validate`.

    Amounts are spread over ordinary retail transfers; optional fields
    are filled at random unless ``full=True`` is requested.
    """

    CURRENCIES = ["CZK", "EUR", "USD", "PLN", "HUF"]
    CURRENCY_WEIGHTS = [0.70, 0.20, 0.05, 0.03, 0.02]

    OPTIONAL_FIELD_RATE = 0.5

    def generate(self, full: bool = False) -> Payment:
        """Generate a single payment.

        Parameters
        ----------
        full : bool
            Set every optional field.

        Returns
        -------
        Payment
            Generated payment.
        """
        builder = Payment.builder(self.fake.iban(), self._amount())

        if self._include(full):
            builder.currency(
                random.choices(self.CURRENCIES, weights=self.CURRENCY_WEIGHTS, k=1)[0]
            )
        if self._include(full):
            builder.reference(str(random.randint(1, 9_999_999_999)))
        if self._include(full):
            builder.recipient(
                to_descriptor_text(self.fake.company(), MAX_RECIPIENT_LENGTH, "PRIJEMCE")
            )
        if self._include(full):
            due = self.fake.date_between(start_date="today", end_date="+30d")
            builder.date(due.strftime("%Y%m%d"))
        if self._include(full):
            builder.payment_type(PaymentType.instant())
        if self._include(full):
            builder.message(
                to_descriptor_text(self.fake.sentence(nb_words=4), MAX_MESSAGE_LENGTH, "PLATBA")
            )
        if self._include(full):
            notify = random.choice(list(NotifyType))
            builder.notify(notify).notify_address(self._notify_address(notify))

        return builder.build()

    def generate_batch(self, count: int, full: bool = False) -> Iterator[Payment]:
        """Generate multiple payments.

        Parameters
        ----------
        count : int
            Number of payments to generate.
        full : bool
            Set every optional field.

        Yields
        ------
        Payment
            Generated payment.
        """
        for _ in range(count):
            yield self.generate(full=full)
        logger.debug(
            "Generated %d payments", count, extra=log_fields(count=count, full=full)
        )

    def _include(self, full: bool) -> bool:
        return full or random.random() < self.OPTIONAL_FIELD_RATE

    def _amount(self) -> str:
        cents = random.randint(100, 9_999_999)
        return f"{cents // 100}.{cents % 100:02d}"

    def _notify_address(self, notify: NotifyType) -> str:
        if notify is NotifyType.PHONE:
            return self.fake.numerify("+420#########")
        user = to_descriptor_text(self.fake.last_name(), 20, "klient").lower()
        user = "".join(ch for ch in user if ch.isalnum()) or "klient"
        return f"{user}{random.randint(1, 999)}@{self.fake.free_email_domain()}"
