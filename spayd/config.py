"""Configuration for sample descriptor generation."""

from dataclasses import dataclass

from spayd.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class GeneratorConfig:
    """Settings for :class:`spayd.generators.PaymentGenerator` runs."""

    seed: int | None = None
    locale: str = "cs_CZ"
    count: int = 10
    full: bool = False  # fill every optional field
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ConfigurationError(f"count must be non-negative, got {self.count}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"log_format must be one of {', '.join(LOG_FORMATS)}, got {self.log_format!r}"
            )

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Create config from environment variables."""
        import os

        seed_str = os.getenv("SPAYD_SEED")
        count_str = os.getenv("SPAYD_COUNT", "10")
        try:
            seed = int(seed_str) if seed_str else None
            count = int(count_str)
        except ValueError as exc:
            raise ConfigurationError(f"Invalid integer setting: {exc}") from exc

        return cls(
            seed=seed,
            locale=os.getenv("SPAYD_LOCALE", "cs_CZ"),
            count=count,
            full=os.getenv("SPAYD_FULL", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
