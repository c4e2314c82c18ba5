"""Sample payment generators."""

from spayd.generators.payment import PaymentGenerator

__all__ = ["PaymentGenerator"]
