"""runtime configuration for the demo cases"""

import logging
import math
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

PARAM_DELAY_ENV = "DEMO_SUITE_PARAM_DELAY"


@dataclass
class DemoConfig:
    # seconds each parameterized case sleeps before asserting
    param_delay: float = 0.5


def check_delay(delay: float, source: str = "delay") -> float:
    """reject delays time.sleep cannot take

    Raises:
        ValueError: if delay is nan, infinite or negative
    """
    if not math.isfinite(delay):
        raise ValueError(f"{source} must be a finite number, got {delay}")
    if delay < 0:
        raise ValueError(f"{source} must be non-negative, got {delay}")
    return delay


def load_config() -> DemoConfig:
    """build config from environment

    Returns:
        config with environment overrides applied

    Raises:
        ValueError: if the delay is not a finite, non-negative number
    """
    config = DemoConfig()

    raw_delay = os.getenv(PARAM_DELAY_ENV)
    if raw_delay is not None:
        try:
            delay = float(raw_delay)
        except ValueError:
            raise ValueError(
                f"{PARAM_DELAY_ENV} must be a number, got {raw_delay!r}"
            ) from None
        config.param_delay = check_delay(delay, PARAM_DELAY_ENV)
        logger.debug(f"param delay set from environment: {delay}")

    return config
