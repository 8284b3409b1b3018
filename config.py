import os
import logging

from encoding import Radix

# ============================================================================
# CONFIGURATION CLASS
# ============================================================================

def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Centralized configuration with validation"""
    # Codec defaults
    DEFAULT_RADIX: str = os.getenv("DEFAULT_RADIX", "OCTAL")

    # Chunked decoding
    CHUNK_SIZE: int = int(os.getenv("CHUNK_SIZE", "128"))
    MAX_WORKERS: int = int(os.getenv("MAX_WORKERS", "4"))

    # Request limits
    MAX_INPUT_LENGTH: int = int(os.getenv("MAX_INPUT_LENGTH", "100000"))

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = _env_flag("RATE_LIMIT_ENABLED", "true")
    RATE_LIMIT_CONVERT: str = os.getenv("RATE_LIMIT_CONVERT", "120/minute")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE: bool = _env_flag("LOG_TO_FILE")
    LOG_DIR: str = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "logs"))
    LOG_MAX_BYTES: int = 10_485_760
    LOG_BACKUP_COUNT: int = 5

    @classmethod
    def validate(cls):
        """Validate configuration on startup"""
        Radix.from_value(cls.DEFAULT_RADIX)
        if cls.CHUNK_SIZE < 1:
            raise ValueError("CHUNK_SIZE must be a positive integer")
        if cls.MAX_WORKERS < 1:
            raise ValueError("MAX_WORKERS must be a positive integer")
        if cls.MAX_INPUT_LENGTH < 1:
            raise ValueError("MAX_INPUT_LENGTH must be a positive integer")
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(f"LOG_LEVEL is not a valid logging level: {cls.LOG_LEVEL}")

# ============================================================================
# SINGLETON INSTANCE & DERIVED CONSTANTS
# ============================================================================

config = Config()

# --- Expose class attributes as module constants for convenience ---
for attr in [a for a in dir(config) if not a.startswith('_') and not callable(getattr(config, a))]:
    globals()[attr] = getattr(config, attr)

# Radix metadata served by the API
RADIX_INFO: list[dict] = [
    {"name": radix.name, "base": radix.base, "alphabet": radix.alphabet}
    for radix in Radix
]

config.RADIX_INFO = RADIX_INFO
