#!/usr/bin/env python3
"""
Document tree abstraction used by the extraction schemas
Extraction code depends on the narrow Element/Document protocols only;
HtmlDocument adapts BeautifulSoup to them.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup

from .errors import MarkupError


class Element(Protocol):
    @property
    def text_content(self) -> str:
        ...

    def attribute(self, name: str) -> Optional[str]:
        ...

    def select(self, selector: str) -> List['Element']:
        ...

    def replace_with_text(self, text: str) -> None:
        ...


class Document(Protocol):
    @property
    def text_content(self) -> str:
        """Text of the document body"""
        ...

    def select(self, selector: str) -> List[Element]:
        ...


class HtmlElement:
    """Element backed by a BeautifulSoup tag"""

    def __init__(self, tag: Tag):
        self._tag = tag

    @property
    def text_content(self) -> str:
        return self._tag.get_text()

    def attribute(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if isinstance(value, list):
            # multi-valued attributes such as class
            return ' '.join(value)
        return value

    def select(self, selector: str) -> List[HtmlElement]:
        return [HtmlElement(tag) for tag in self._tag.select(selector)]

    def replace_with_text(self, text: str) -> None:
        self._tag.replace_with(NavigableString(text))

    def __repr__(self) -> str:
        return f"HtmlElement({self._tag.name!r})"


class HtmlDocument:
    """Document backed by a parsed BeautifulSoup tree"""

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    @property
    def text_content(self) -> str:
        body = self._soup.body
        if body is None:
            return self._soup.get_text()
        return body.get_text()

    def select(self, selector: str) -> List[HtmlElement]:
        return [HtmlElement(tag) for tag in self._soup.select(selector)]


def parse_html(markup: str) -> HtmlDocument:
    try:
        return HtmlDocument(BeautifulSoup(markup, 'html.parser'))
    except ParserRejectedMarkup as e:
        raise MarkupError(str(e)) from e
