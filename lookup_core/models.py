#!/usr/bin/env python3
"""
Lookup result model shared by every provider
Uniform result shape, dead-result detection and list-field normalization
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from .text_normalization import unique_non_blank


class Upstream(str, Enum):
    """Origin provider of a lookup result"""

    NONE = ''
    SAOL = 'saol'
    SO = 'so'
    GLOSBE = 'glosbe'
    REVERSO = 'reverso'


@dataclass(frozen=True)
class LookupResult:
    """Normalized result for one headword from one upstream provider"""

    upstream: Upstream
    baseform: str
    compounds: Tuple[str, ...] = field(default_factory=tuple)
    compounds_lemma: Tuple[str, ...] = field(default_factory=tuple)
    definitions: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def dead(cls) -> 'LookupResult':
        """Placeholder meaning "no usable data" (filtered before responding)"""
        return cls(upstream=Upstream.NONE, baseform='')

    @property
    def is_dead(self) -> bool:
        return self.upstream == Upstream.NONE or self.baseform == ''

    @property
    def identity(self) -> Tuple[str, str]:
        return (self.baseform, self.upstream.value)

    def normalized(self) -> 'LookupResult':
        """Copy with deduplicated, blank-free list fields"""
        return replace(
            self,
            compounds=tuple(unique_non_blank(self.compounds)),
            compounds_lemma=tuple(unique_non_blank(self.compounds_lemma)),
            definitions=tuple(unique_non_blank(self.definitions)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation (camelCase keys)"""
        return {
            'upstream': self.upstream.value,
            'baseform': self.baseform,
            'compounds': list(self.compounds),
            'compoundsLemma': list(self.compounds_lemma),
            'definitions': list(self.definitions),
        }


def finalize_results(results: Iterable[LookupResult]) -> List[LookupResult]:
    """Drop dead results, collapse (baseform, upstream) duplicates, normalize lists.

    The first occurrence of a duplicate wins, so provider order is preserved.
    """
    seen = set()
    finalized: List[LookupResult] = []
    for result in results:
        if result.is_dead or result.identity in seen:
            continue
        seen.add(result.identity)
        finalized.append(result.normalized())
    return finalized


def results_to_payload(results: Sequence[LookupResult]) -> List[Dict[str, Any]]:
    return [result.to_dict() for result in results]
