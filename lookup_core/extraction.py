#!/usr/bin/env python3
"""
Extraction schemas
One function per upstream provider, mapping a parsed document to a LookupResult.
Only the Document/Element protocols are used, never the parser directly.
"""

import logging

from .document import Document
from .errors import ExtractionMismatch
from .models import LookupResult, Upstream
from .providers import TranslationProvider
from .text_normalization import (
    clean_definition,
    clean_headword,
    collapse_whitespace,
    split_compounds,
    strip_numeric_suffix,
)

logger = logging.getLogger(__name__)

# SAOL
SAOL_HEADWORD = '.grundform'
SAOL_LEMMA = '.hvord'
SAOL_DEFINITION = '.lexemid .def'

# SO
SO_HEADWORD = '.orto'
SO_DEFINITION = '.kbetydelse'
SO_VARIANT_FORM = '.kbetydelse .varform'
SO_HISTORICAL_FORM = '.kbetydelse .histform'
SO_HISTORICAL_CLASS = 'histform'


def _first_text(document: Document, selector: str) -> str:
    elements = document.select(selector)
    if not elements:
        return ''
    return elements[0].text_content


def extract_primary(document: Document) -> LookupResult:
    """
    Build a SAOL result: compounds from the headword split on '|',
    lemma forms without their numeric homograph suffix, and raw definitions.
    """
    headword = clean_headword(_first_text(document, SAOL_HEADWORD))
    compounds = split_compounds(headword)
    baseform = ''.join(compounds).strip()

    compounds_lemma = [
        strip_numeric_suffix(element.text_content)
        for element in document.select(SAOL_LEMMA)
    ]
    definitions = [element.text_content for element in document.select(SAOL_DEFINITION)]

    return LookupResult(
        upstream=Upstream.SAOL,
        baseform=baseform,
        compounds=tuple(compounds),
        compounds_lemma=tuple(compounds_lemma),
        definitions=tuple(definitions),
    )


def _validate_headword(baseform: str, document: Document) -> None:
    found = ''.join(split_compounds(clean_headword(_first_text(document, SO_HEADWORD))))
    if found != baseform:
        raise ExtractionMismatch(expected=baseform, found=found)


def _inline_annotations(document: Document) -> None:
    """Turn variant/historical form markers into bracketed text that survives cleanup"""
    markers = document.select(f"{SO_VARIANT_FORM}, {SO_HISTORICAL_FORM}")
    # reverse document order rewrites nested markers before the one enclosing them
    for element in reversed(markers):
        text = collapse_whitespace(element.text_content)
        if SO_HISTORICAL_CLASS in (element.attribute('class') or '').split():
            element.replace_with_text(f" <{text}> ")
        else:
            element.replace_with_text(f" ({text}) ")


def extract_secondary(baseform: str, document: Document) -> LookupResult:
    """
    Build an SO result for a baseform resolved by SAOL.

    SO search is fuzzy, so the document's own headword must equal the
    baseform exactly; otherwise the page describes another word and a dead
    result is returned.
    """
    try:
        _validate_headword(baseform, document)
    except ExtractionMismatch as e:
        logger.debug(f"SO headword mismatch, discarding: {e}")
        return LookupResult.dead()

    _inline_annotations(document)
    definitions = [
        clean_definition(element.text_content)
        for element in document.select(SO_DEFINITION)
    ]

    return LookupResult(
        upstream=Upstream.SO,
        baseform=baseform,
        definitions=tuple(definitions),
    )


def extract_translation(provider: TranslationProvider, word: str, document: Document) -> LookupResult:
    """Translation entries of a Glosbe/Reverso page as the definitions of `word`"""
    definitions = [
        collapse_whitespace(element.text_content)
        for element in document.select(provider.translation_selector)
    ]
    return LookupResult(
        upstream=provider.upstream,
        baseform=word,
        definitions=tuple(definitions),
    )
