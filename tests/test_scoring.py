"""Tests for compare, distance and match."""

import random

import pytest

from wildfuzz import MatrixTooLargeError, compare, distance, match

# pattern, text, ignore_case, ignore_punctuation, expected distance, score denominator
CASES = [
    ("Something", "Samething", False, False, 1, 9),
    ("Something", "aSomething", False, False, 1, 10),
    ("Something", "Nothing", False, False, 3, 9),
    ("Nothing", "Something", False, False, 3, 9),
    ("Something else like that", "Something Else Like That", True, False, 0, 24),
    ("Something else like that", "Something, else... like that?", False, True, 0, 24),
    ("Something, else... like that?", "Something else like that", False, True, 0, 24),
    ("-.SoMe?ThInG+ else like that", "Something else like that", True, False, 4, 28),
    ("Something else like that", "-.SoMe?ThInG+ else like that", True, False, 4, 28),
    ("-.SoMe?ThInG+ else like that", "Something else like that", False, True, 4, 24),
    ("Something else like that", "-.SoMe?ThInG+ else like that", False, True, 4, 24),
    ("-.SoMe?ThInG+ else like that", "Something else like that", True, True, 0, 24),
    ("Something else like ¿", "Something else like that", False, False, 0, 24),
    ("something else like ¿", "Something else like that", False, False, 1, 24),
    ("Something else like ¿", "Nothing else like that", False, False, 3, 22),
    ("Nothing else like ¿", "Something else like that", False, False, 3, 24),
    ("Something else like ¿", "Something Else Like That", False, False, 2, 24),
    ("Something else like ¿", "Somthing ls lik that", False, False, 4, 21),
    ("Somthing ls lik ¿", "Something else like that", False, False, 4, 24),
    ("Something else like ¿", "Somathing alsa lika that", False, False, 4, 24),
    ("Something else like ¿", "Something aelsea likea that", False, False, 3, 27),
    ("Something aelsea likea ¿", "Something else like that", False, False, 3, 24),
    ("Something else like ¿", "Something else like that?", False, False, 0, 25),
    ("Something else like ¿?", "Something else like that", False, False, 1, 24),
    ("Something else like ¿", "Something, else... like that?", False, False, 4, 29),
    ("Something, else... like ¿?", "Something else like that", False, False, 5, 26),
    ("¿", "Something else like that", False, False, 0, 24),
    ("Something Else Like ¿", "Something else like that", True, False, 0, 24),
    ("Something, else... like ¿?", "Something else like that", False, True, 0, 24),
    ("-.SoMe?ThInG+ else like ¿", "Something else like that", True, False, 4, 25),
    ("Something else like ¿", "-.SoMe?ThInG+ else like that", True, False, 4, 28),
    ("-.SoMe?ThInG+ else like ¿", "Something else like that", False, True, 4, 24),
    ("Something else like ¿", "-.SoMe?ThInG+ else like that", True, True, 0, 24),
    ("¿ else like ¿", "Something else like that", False, False, 0, 24),
    ("¿ else like ¿", "Nothing else like this", False, False, 0, 22),
    ("¿ else ¿ ¿", "Something else like that", False, False, 0, 24),
    ("¿ else ¿", "Something else like that", False, False, 0, 24),
    ("¿thing else ¿", "Somethin else like that", False, False, 1, 23),
    ("¿thin else ¿", "Something else like that", False, False, 1, 24),
    ("¿thing else ¿", "Something elsea like that", False, False, 1, 25),
    ("¿thing elsea ¿", "Something else like that", False, False, 1, 24),
    ("¿thing else ¿", "thing else again", False, False, 0, 16),
    ("¿¿¿¿¿thing elsea ¿¿", "Something else like that", False, False, 1, 24),
]


@pytest.mark.parametrize("pattern,text,ic,ip,dist,length", CASES)
def test_distance(pattern, text, ic, ip, dist, length) -> None:
    assert distance(pattern, text, ignore_case=ic, ignore_punctuation=ip) == dist


@pytest.mark.parametrize("pattern,text,ic,ip,dist,length", CASES)
def test_compare(pattern, text, ic, ip, dist, length) -> None:
    score = compare(pattern, text, ignore_case=ic, ignore_punctuation=ip)
    assert score == pytest.approx((length - dist) / length)


def test_collapsed_wildcards_score_the_same() -> None:
    text = "Something else like that"
    assert compare("¿¿¿¿¿thing elsea ¿¿", text) == compare("¿thing elsea ¿", text)
    assert distance("a¿¿¿b", "axyzb") == distance("a¿b", "axyzb") == 0


def test_degenerate_inputs() -> None:
    assert compare("", "Something else like that") == 0.0
    assert compare("Something else like ¿", "") == 0.0
    assert compare("", "") == 0.0
    assert distance("", "abc") == 3
    assert distance("abc", "") == 3
    assert distance("Something else like ¿", "") == 21
    assert distance("", "") == 0
    assert distance("¿", "") == 1


def test_scores_stay_in_unit_interval() -> None:
    for pattern, text in [("abc", "xyzxyzxyz"), ("¿a¿b¿c", "q"), ("x", "y")]:
        assert 0.0 <= compare(pattern, text) <= 1.0


def test_output_lists_are_appended() -> None:
    variables = [["already here"]]
    tokens = []
    score = compare("¿ else like ¿", "Something else like that", variables, tokens)
    assert score == 1.0
    assert variables == [["already here"], ["Something", "that"]]
    assert tokens == [["", " else like ", ""]]


def test_distance_fills_only_requested_list() -> None:
    variables = []
    assert distance("Something ¿ that", "Something else like that", variables) == 0
    assert ["else like"] in variables


def test_match_result_fields() -> None:
    result = match("Hello ¿!", "hello world!", ignore_case=True, ignore_punctuation=True)
    assert result.normalized_pattern == "Hello ¿"
    assert result.exact
    assert result.score == 1.0
    assert ["world!"] in result.variables
    assert ["hello ", ""] in result.tokens


def test_plain_comparison_ignores_cell_limit() -> None:
    assert distance("abc", "abd", max_cells=1) == 1
    with pytest.raises(MatrixTooLargeError):
        distance("¿abc", "abd", max_cells=1)


@pytest.mark.parametrize("s", ["Something", "Something else like that", "a, b; c!"])
def test_identical_strings(s: str) -> None:
    assert distance(s, s) == 0
    assert compare(s, s) == 1.0
    assert compare(s, s, ignore_punctuation=True) == 1.0


@pytest.mark.parametrize("pattern,text", [
    ("Something else like ¿", "Something Else Like That"),
    ("¿thing elsea ¿", "Something else like that"),
    ("Nothing", "Something"),
])
def test_ignore_case_is_case_invariant(pattern: str, text: str) -> None:
    base = compare(pattern, text, ignore_case=True)
    for p, t in [(pattern.upper(), text), (pattern, text.swapcase()), (pattern.lower(), text.upper())]:
        assert compare(p, t, ignore_case=True) == base


@pytest.mark.parametrize("pattern,text,noisy", [
    ("b", "abb", ",abb"),
    ("ab", "bab", "b,ab"),
    ("bab", "ababb", "..ababb"),
    ("a¿bc", "a", "a,"),
    ("a¿b", "ab", "a,b"),
    ("¿ else", "Something else", "!Something, else?"),
])
def test_punctuation_never_lowers_score(pattern: str, text: str, noisy: str) -> None:
    plain = compare(pattern, text, ignore_punctuation=True)
    assert compare(pattern, noisy, ignore_punctuation=True) >= plain
    assert distance(pattern, noisy, ignore_punctuation=True) <= distance(pattern, text, ignore_punctuation=True)


def test_punctuation_never_lowers_score_random() -> None:
    rng = random.Random(1234)
    for _ in range(2000):
        pattern = "".join(rng.choice("ab¿ ") for _ in range(rng.randint(1, 5)))
        text = "".join(rng.choice("ab ") for _ in range(rng.randint(1, 7)))
        noisy = list(text)
        for _ in range(rng.randint(1, 3)):
            noisy.insert(rng.randint(0, len(noisy)), rng.choice(",.!?-"))
        noisy = "".join(noisy)
        plain = compare(pattern, text, ignore_punctuation=True)
        assert compare(pattern, noisy, ignore_punctuation=True) >= plain, (pattern, text, noisy)


def test_all_punctuation_text_is_empty_when_skipped() -> None:
    result = match("¿a", ",", ignore_punctuation=True)
    assert result.score == 0.0
    assert result.distance == 2
    assert result.extractions == []
    assert distance("", ",.", ignore_punctuation=True) == 0
    assert distance("¿a", ",") == 1
