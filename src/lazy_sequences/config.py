"""Configuration management for the demo."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class DemoConfig:
    """Demo configuration parameters."""

    demo_count: int = 100
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Load demo configuration from environment variables."""
        return cls(
            demo_count=int(os.getenv("DEMO_COUNT", "100")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.demo_count < 0:
            raise ValueError("demo_count must not be negative")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")


def get_demo_config() -> DemoConfig:
    """Get demo configuration."""
    return DemoConfig.from_env()
