# services/config.py
import logging
import os
from dataclasses import dataclass

from constants import FALLBACK_LABEL_PREFIX


@dataclass(frozen=True)
class ComparisonConfig:
    """Configuration for the comparison services."""

    # Label prefix for empty slots ("Influencer 1", "Influencer 2")
    fallback_label_prefix: str = os.getenv(
        "IIQ_FALLBACK_LABEL_PREFIX", FALLBACK_LABEL_PREFIX
    )
    # Local users payload read by the CLI
    data_path: str = os.getenv("IIQ_DATA_PATH", "users.json")
    log_level: str = os.getenv("IIQ_LOG_LEVEL", "INFO")

    def fallback_label(self, slot: int) -> str:
        return f"{self.fallback_label_prefix} {slot + 1}"


def setup_logging(level: str | None = None):
    """Configure logging for the application.

    This function should be called at application startup.
    It configures the logging format and level.
    """
    logging.basicConfig(
        level=(level or ComparisonConfig().log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
