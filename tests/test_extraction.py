"""Tests for the extraction schemas and the HTML document adapter."""

import textwrap

from lookup_core.document import parse_html
from lookup_core.extraction import extract_primary, extract_secondary, extract_translation
from lookup_core.models import LookupResult, Upstream
from lookup_core.providers import GLOSBE, REVERSO

from upstream_fakes import glosbe_page, reverso_page, saol_entry_page, so_entry_page


def test_document_text_and_attributes():
    document = parse_html('<html><body><a class="slank x" href="f_saol.php?id=1">and</a></body></html>')
    links = document.select("a.slank")
    assert len(links) == 1
    assert links[0].attribute("href") == "f_saol.php?id=1"
    assert links[0].attribute("class") == "slank x"
    assert links[0].attribute("title") is None
    assert document.text_content == "and"


def test_extract_primary_splits_compounds():
    document = parse_html(saol_entry_page(
        "sjö|fågel",
        lemmas=["sjö 1", "fågel"],
        definitions=["fågel som lever vid sjöar"],
    ))

    result = extract_primary(document)

    assert result.upstream is Upstream.SAOL
    assert result.baseform == "sjöfågel"
    assert result.compounds == ("sjö", "fågel")
    assert result.compounds_lemma == ("sjö", "fågel")
    assert result.definitions == ("fågel som lever vid sjöar",)


def test_extract_primary_uses_first_headword_only():
    html = textwrap.dedent(
        """
        <html><body>
          <span class="grundform">and|en</span>
          <span class="grundform">ande</span>
        </body></html>
        """
    )
    result = extract_primary(parse_html(html))
    assert result.baseform == "anden"
    assert result.compounds == ("and", "en")


def test_extract_primary_keeps_raw_definition_text():
    document = parse_html(saol_entry_page("and", definitions=["  simfågel, 1. tam  "]))
    assert extract_primary(document).definitions == ("  simfågel, 1. tam  ",)


def test_extract_primary_without_headword_is_dead():
    result = extract_primary(parse_html("<html><body><p>nothing</p></body></html>"))
    assert result.baseform == ""
    assert result.is_dead


def test_extract_secondary_cross_validates_headword():
    document = parse_html(so_entry_page("ande", ["övernaturligt väsen"]))

    result = extract_secondary("and", document)

    assert result == LookupResult.dead()
    assert result.baseform == ""
    assert result.upstream.value == ""


def test_extract_secondary_is_case_sensitive():
    document = parse_html(so_entry_page("And", ["simfågel"]))
    assert extract_secondary("and", document).is_dead


def test_extract_secondary_rewrites_annotation_markers():
    document = parse_html(so_entry_page("and", [
        'simfågel <span class="varform">äv. anka</span> med platt näbb',
        'tam fågel<span class="histform">förr: and-fogel</span>; se 2.',
    ]))

    result = extract_secondary("and", document)

    assert result.upstream is Upstream.SO
    assert result.baseform == "and"
    assert result.compounds == ()
    assert result.compounds_lemma == ()
    assert result.definitions == (
        "simfågel (äv anka) med platt näbb",
        "tam fågel <förr andfogel> se",
    )


def test_extract_secondary_keeps_nested_markers():
    document = parse_html(so_entry_page("and", [
        'a <span class="varform">x <span class="histform">y</span></span> b',
        'c <span class="histform">z <span class="varform">w</span></span> d',
    ]))

    result = extract_secondary("and", document)

    assert result.definitions == ("a (x <y>) b", "c <z (w)> d")


def test_extract_secondary_headword_with_boundary_marker_matches():
    document = parse_html(so_entry_page("and|en", ["bestämd form"]))
    assert extract_secondary("anden", document).baseform == "anden"


def test_extract_translation_glosbe():
    result = extract_translation(GLOSBE, "di", parse_html(glosbe_page("av", "från", "om")))
    assert result.upstream is Upstream.GLOSBE
    assert result.baseform == "di"
    assert result.definitions == ("av", "från", "om")
    assert result.compounds == ()


def test_extract_translation_reverso():
    result = extract_translation(REVERSO, "di", parse_html(reverso_page("av", "från")))
    assert result.upstream is Upstream.REVERSO
    assert result.definitions == ("av", "från")
