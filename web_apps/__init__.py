"""
Web applications for the word lookup proxy.

This package contains the HTTP listener:
- FastAPI application forwarding lookup requests to the lookup service
"""

# Web applications are typically run as modules, not imported
# but we can expose the factory for programmatic use

from .lookup_web_app import create_app

__all__ = ['create_app']
