"""Error taxonomy for the lookup pipeline."""

from typing import Optional


class WordLookupError(Exception):
    """Base class for every error raised by the lookup pipeline"""


class BadRequestError(WordLookupError):
    """Invalid or missing request parameters (reported to the caller as 400)"""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class InvalidLanguageError(BadRequestError):
    """Source language code absent from the translation language table"""

    def __init__(self, language: str):
        super().__init__(f"Unsupported sourceLanguage '{language}'")
        self.language = language


class UpstreamError(WordLookupError):
    """Network failure, timeout or non-2xx status from an upstream provider"""

    def __init__(self, message: str, url: str = '', status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status


class ExtractionMismatch(WordLookupError):
    """Secondary document describes a different headword than the expected baseform"""

    def __init__(self, expected: str, found: str):
        super().__init__(f"expected headword '{expected}', found '{found}'")
        self.expected = expected
        self.found = found


class MarkupError(WordLookupError):
    """Upstream page that the HTML parser refused to read"""
