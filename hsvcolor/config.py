"""
hsvcolor Configuration
Manages environment variables and defaults for package logging.
"""
import os


class Config:
    """Configuration class for hsvcolor."""

    # Logging
    LOG_ENABLED: bool = bool(int(os.environ.get("HSVCOLOR_LOG_ENABLED", "0")))
    LOG_LEVEL: str = os.environ.get("HSVCOLOR_LOG_LEVEL", "WARNING")
    LOG_SERIALIZE: bool = bool(int(os.environ.get("HSVCOLOR_LOG_SERIALIZE", "0")))

    # Standard loguru level names
    LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

    @classmethod
    def validate_log_level(cls, level: str) -> bool:
        """Validate log level name."""
        return level.upper() in cls.LOG_LEVELS


# Global config instance
config = Config()
