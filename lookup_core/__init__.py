"""
Core word lookup components.

This package contains the lookup-resolution pipeline of the proxy:
- Result model, text normalization and extraction schemas
- Provider client, disambiguation resolver and aggregation pipeline
- Language routing and the per-language result cache
- Request handling and configuration
"""

from .aggregation import AggregationPipeline
from .cache import CacheRegistry, LRUCache
from .config import LookupConfig, configure_logging
from .errors import (
    BadRequestError,
    ExtractionMismatch,
    InvalidLanguageError,
    MarkupError,
    UpstreamError,
    WordLookupError,
)
from .language_router import LanguageRouter
from .lookup_service import LookupResponse, LookupService, build_lookup_service
from .models import LookupResult, Upstream
from .provider_client import ProviderClient, attempt

__all__ = [
    'AggregationPipeline',
    'CacheRegistry',
    'LRUCache',
    'LookupConfig',
    'configure_logging',
    'BadRequestError',
    'ExtractionMismatch',
    'InvalidLanguageError',
    'MarkupError',
    'UpstreamError',
    'WordLookupError',
    'LanguageRouter',
    'LookupResponse',
    'LookupService',
    'build_lookup_service',
    'LookupResult',
    'Upstream',
    'ProviderClient',
    'attempt',
]
