import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

ENV_PREFIX = "PRICING_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class PricingConfig:
    # Loyalty points
    POINTS_TO_THB_RATIO: float = 1.0
    POINTS_CAP_PERCENTAGE: float = 0.20

    # Result rounding
    ROUNDING_PLACES: int = 2

    # Input files
    CART_FILE_EXTENSION: str = ".json"

    # Logging
    LOG_LEVEL: str = "WARNING"

    def __post_init__(self) -> None:
        if self.POINTS_TO_THB_RATIO < 0:
            raise ValueError(f"{ENV_PREFIX}POINTS_TO_THB_RATIO must be non-negative, got {self.POINTS_TO_THB_RATIO}")
        if not 0 <= self.POINTS_CAP_PERCENTAGE <= 1:
            raise ValueError(f"{ENV_PREFIX}POINTS_CAP_PERCENTAGE must be between 0 and 1, got {self.POINTS_CAP_PERCENTAGE}")
        if self.ROUNDING_PLACES < 0:
            raise ValueError(f"{ENV_PREFIX}ROUNDING_PLACES must be non-negative, got {self.ROUNDING_PLACES}")
        if not self.CART_FILE_EXTENSION.startswith("."):
            raise ValueError(f"{ENV_PREFIX}CART_FILE_EXTENSION must start with '.', got {self.CART_FILE_EXTENSION!r}")
        if self.LOG_LEVEL.upper() not in LOG_LEVELS:
            raise ValueError(f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.LOG_LEVEL!r}")

config = PricingConfig()


def load_config(environ: Optional[Mapping[str, str]] = None) -> PricingConfig:
    """
    Builds a PricingConfig from PRICING_* environment variables.

    Variables that are unset keep the dataclass default. The CLI loads any
    .env file into the process environment before calling this.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        PricingConfig: The resolved configuration.

    Raises:
        ValueError: If a variable cannot be parsed or is out of range.
    """
    if environ is None:
        environ = os.environ

    overrides = {}
    for f in fields(PricingConfig):
        key = ENV_PREFIX + f.name
        raw = environ.get(key)
        if raw is None or raw.strip() == "":
            continue
        try:
            overrides[f.name] = f.type(raw.strip())
        except ValueError:
            raise ValueError(f"{key} must be a valid {f.type.__name__}, got {raw!r}")

    return PricingConfig(**overrides)
