"""Unit tests for start selection, random walks and rejection sampling."""

import random

import pytest

import wordwalk as ww
from wordwalk import WalkEnd
from wordwalk.errors import StrategyError


def _graph(text: str) -> ww.SuccessorGraph:
    g = ww.SuccessorGraph()
    ww.scan(text, g)
    g.freeze()
    return g


def _sampler(text: str, seed: int = 0, **kwargs) -> ww.SentenceSampler:
    return ww.SentenceSampler(_graph(text), rng=random.Random(seed), **kwargs)


# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def questions():
    """Corpus where "Who are you?" is the only path ending in '?'."""
    return "Who are you? Run away! Run fast."


# Terminal predicate
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("spelling", ["end.", "why?", "stop!", "...", "?"])
def test_terminal_spellings(spelling):
    """Tokens ending in . ? or ! end a sentence."""
    assert ww.ends_sentence(spelling)


@pytest.mark.parametrize("spelling", ["", "word", "comma,", "quote.\"", "semi;"])
def test_non_terminal_spellings(spelling):
    """Anything else does not."""
    assert not ww.ends_sentence(spelling)


# Start selection
# ---------------------------------------------------------------------------


def test_uppercase_strategy():
    """Only tokens opening with an uppercase letter are accepted."""
    strat = ww.get_strategy("uppercase")
    assert strat.accepts("Who")
    assert strat.accepts("Élan")
    assert not strat.accepts("who")
    assert not strat.accepts('"Who')
    assert not strat.accepts("42")
    assert not strat.accepts("")


def test_pick_start_returns_uppercase_token(questions):
    """Random draws only ever settle on accepted tokens."""
    sampler = _sampler(questions, seed=3)
    starts = {sampler.graph.spelling(sampler.pick_start()) for _ in range(50)}
    assert starts <= {"Who", "Run"}


def test_pick_start_falls_back_to_linear_scan():
    """With no random draws allowed the lowest accepted id wins."""
    sampler = _sampler("x y Z w Q", max_start_attempts=0)
    assert sampler.pick_start() == 2


def test_pick_start_defaults_to_zero():
    """No acceptable token at all degrades to id 0."""
    sampler = _sampler("all lower case", strategy=ww.CustomStartStrategy(set()))
    assert sampler.pick_start() == 0


def test_pick_start_empty_vocabulary():
    """An empty graph has no start token."""
    assert _sampler("").pick_start() is None


def test_custom_strategy_requires_subset():
    """The custom strategy needs its allowed subset."""
    with pytest.raises(StrategyError):
        ww.get_strategy("custom")
    strat = ww.get_strategy("custom", allowed_subset={"Run"})
    assert strat.accepts("Run") and not strat.accepts("Who")


def test_unknown_strategy_raises():
    """Unknown strategy names raise StrategyError."""
    with pytest.raises(StrategyError):
        ww.get_strategy("lowercase")


# Walks
# ---------------------------------------------------------------------------


def test_walk_stops_at_terminal_token():
    """A deterministic chain runs until its sentence-ending token."""
    result = _sampler("Alpha beta gamma. delta").walk()
    assert result.text == "Alpha beta gamma."
    assert result.end is WalkEnd.TERMINAL
    assert result.terminal
    assert result.token_ids == (0, 1, 2)


def test_walk_single_terminal_token():
    """A start token that already ends a sentence is the whole output."""
    result = _sampler("Stop. go").walk()
    assert result.text == "Stop."
    assert result.end is WalkEnd.TERMINAL


def test_walk_reports_dead_end():
    """Running out of successors is a non-terminal end."""
    result = _sampler("Hello world").walk()
    assert result.text == "Hello world"
    assert result.end is WalkEnd.DEAD_END
    assert not result.terminal


def test_walk_truncates_before_overflow():
    """A token that would exceed max_chars is not appended."""
    result = _sampler("Alpha beta gamma.").walk(max_chars=10)
    assert result.text == "Alpha beta"
    assert result.end is WalkEnd.TRUNCATED


def test_walk_cuts_oversized_start_token():
    """A start token longer than the bound is cut to fit."""
    result = _sampler("Alphabet soup.").walk(max_chars=3)
    assert result.text == "Alp"
    assert result.end is WalkEnd.TRUNCATED


def test_walk_empty_vocabulary():
    """An empty graph yields empty, non-terminal output."""
    result = _sampler("").walk()
    assert result == ww.WalkResult("", WalkEnd.DEAD_END, ())
    assert result.last_char == ""


@pytest.mark.parametrize("max_chars", [1, 2, 7, 50, 333])
def test_walk_terminates_on_cycles(max_chars):
    """Cyclic graphs without terminal tokens stop at the size bound."""
    sampler = _sampler("a b a b a b c a", seed=max_chars)
    result = sampler.walk(max_chars=max_chars)
    assert len(result.text) <= max_chars
    assert result.end is WalkEnd.TRUNCATED
    # every appended token costs at least two characters
    assert len(result.token_ids) <= max_chars // 2 + 1


def test_walk_rejects_non_positive_bound():
    """max_chars must be positive."""
    with pytest.raises(ValueError):
        _sampler("Hi there").walk(max_chars=0)


def test_walk_follows_observed_frequencies():
    """Successors are drawn proportionally to how often they were seen."""
    sampler = _sampler("Go left. Go left. Go left. Go right.", seed=11)
    texts = [sampler.walk().text for _ in range(2000)]
    left = texts.count("Go left.")
    assert texts.count("Go right.") + left == 2000
    # expected 1500 with a standard deviation of about 19
    assert 1350 < left < 1650


def test_same_seed_same_walks(questions):
    """Seeded samplers are reproducible."""
    a = _sampler(questions, seed=42)
    b = _sampler(questions, seed=42)
    assert [a.walk().text for _ in range(20)] == [b.walk().text for _ in range(20)]


# Rejection sampling
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("seed", range(10))
def test_question_sentence(questions, seed):
    """The only '?' sentence reachable from an uppercase start is found."""
    result = _sampler(questions, seed=seed).sample_ending("?")
    assert result is not None
    assert result.text == "Who are you?"


@pytest.mark.parametrize("seed", range(10))
def test_exclamation_sentence(questions, seed):
    """'!' sentences start from "Run"."""
    result = _sampler(questions, seed=seed).sample_ending("!")
    assert result is not None
    assert result.text == "Run away!"


def test_retry_exhaustion_returns_none(questions):
    """A mark that never ends a walk exhausts the retry budget."""
    assert _sampler(questions).sample_ending(";", retries=25) is None


def test_zero_retries_returns_none(questions):
    """No attempts means no sentence."""
    assert _sampler(questions).sample_ending("?", retries=0) is None


def test_mark_must_be_single_character(questions):
    """Marks are single characters."""
    with pytest.raises(ValueError):
        _sampler(questions).sample_ending("?!")
