"""Unit tests for delimiter tokenization and corpus scanning."""

import pytest

import wordwalk as ww
from wordwalk.errors import PatternError
from wordwalk.pattern import compile_delimiters


# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def scanned():
    """Return a graph scanned from a two-sentence corpus and its token count."""
    g = ww.SuccessorGraph()
    n = ww.scan("Alice saw Bob. Bob ran!", g)
    return g, n


# Token boundaries
# ---------------------------------------------------------------------------


def test_punctuation_stays_attached():
    """Tokens split on space/CR/LF only, keeping trailing marks."""
    tokens = list(ww.iter_tokens("Alice saw Bob. Bob ran!"))
    assert tokens == ["Alice", "saw", "Bob.", "Bob", "ran!"]


def test_delimiter_runs_are_skipped():
    """Leading, trailing and repeated delimiters yield no empty tokens."""
    tokens = list(ww.iter_tokens("  \r\n Hello,\n\n\r  world \n"))
    assert tokens == ["Hello,", "world"]


def test_tab_is_not_a_default_delimiter():
    """The default set is space, CR and LF; tabs stay inside tokens."""
    assert list(ww.iter_tokens("a\tb c")) == ["a\tb", "c"]


def test_whitespace_delimiter_set():
    """The whitespace set also splits on tabs."""
    delims = ww.Delimiters.get("whitespace")
    assert list(ww.iter_tokens("a\tb c", delims)) == ["a", "b", "c"]


def test_custom_delimiters():
    """Any character set can act as delimiters, regex metacharacters included."""
    assert list(ww.iter_tokens("a]b^c-d", "]^-")) == ["a", "b", "c", "d"]


def test_empty_and_blank_text():
    """Empty or delimiter-only text yields no tokens."""
    assert list(ww.iter_tokens("")) == []
    assert list(ww.iter_tokens(" \n\r ")) == []


def test_iter_tokens_is_lazy():
    """Tokens are produced on demand."""
    it = ww.iter_tokens("one two three")
    assert next(it) == "one"
    assert next(it) == "two"


# Scanning into the graph
# ---------------------------------------------------------------------------


def test_scan_records_consecutive_pairs(scanned):
    """Five tokens give exactly four edges, in order."""
    g, n = scanned
    assert n == 5
    assert g.edge_count == 4
    assert g.interner.spellings == ("Alice", "saw", "Bob.", "Bob", "ran!")
    edges = [
        (g.spelling(i), succ)
        for i in range(len(g))
        for succ in g.successor_spellings(i)
    ]
    assert edges == [("Alice", "saw"), ("saw", "Bob."), ("Bob.", "Bob"), ("Bob", "ran!")]


def test_scan_interns_single_token():
    """A lone first token is interned with no edge."""
    g = ww.SuccessorGraph()
    assert ww.scan("Hi", g) == 1
    assert g.lookup("Hi") == 0
    assert g.edge_count == 0


def test_scan_empty_text():
    """Scanning nothing leaves the graph empty."""
    g = ww.SuccessorGraph()
    assert ww.scan("", g) == 0
    assert len(g) == 0


# Delimiter sets
# ---------------------------------------------------------------------------


def test_unknown_delimiter_set_raises():
    """Unknown set names raise PatternError."""
    with pytest.raises(PatternError):
        ww.Delimiters.get("punctuation")


def test_empty_delimiter_set_raises():
    """An empty set cannot delimit anything."""
    with pytest.raises(PatternError):
        compile_delimiters("")


def test_list_delimiters():
    """Built-in set names are listed in lower case."""
    assert ww.list_delimiters() == ["default", "whitespace"]
