#!/usr/bin/env python3
"""
Configuration Management for the Word Lookup Proxy
Listener, cache, upstream and logging settings from environment variables
(optionally seeded from a .env file)
"""

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Logging Configuration
LOGGING = {
    'level': 'INFO',
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


@dataclass
class LookupConfig:
    """Runtime settings with validation"""
    host: str = '0.0.0.0'
    port: int = 8000
    cors_allow_origin: Optional[str] = None
    cache_size: int = 100_000
    upstream_timeout: float = 10.0
    cache_max_age: int = 604800
    log_level: str = LOGGING['level']

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not (1 <= self.port <= 65535):
            raise ValueError("Port must be between 1 and 65535")
        if self.cache_size < 1:
            raise ValueError("Cache size must be at least 1")
        if self.upstream_timeout <= 0:
            raise ValueError("Upstream timeout must be positive")
        if self.cache_max_age < 0:
            raise ValueError("Cache max-age cannot be negative")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'LookupConfig':
        """Create configuration from environment variables (after loading .env)"""
        load_dotenv(env_file)
        return cls(
            host=os.getenv('LOOKUP_HOST', '0.0.0.0'),
            port=int(os.getenv('LOOKUP_PORT', '8000')),
            cors_allow_origin=os.getenv('LOOKUP_CORS_ALLOW_ORIGIN') or None,
            cache_size=int(os.getenv('LOOKUP_CACHE_SIZE', '100000')),
            upstream_timeout=float(os.getenv('LOOKUP_UPSTREAM_TIMEOUT', '10')),
            cache_max_age=int(os.getenv('LOOKUP_CACHE_MAX_AGE', '604800')),
            log_level=os.getenv('LOOKUP_LOG_LEVEL', LOGGING['level']),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def configure_logging(config: LookupConfig) -> None:
    logging.basicConfig(level=config.log_level, format=LOGGING['format'])
