import pytest
from wordlesolver.engine import (CandidateSet, LetterStatus, MalformedFeedbackError,
                                 filter_candidates, is_consistent, parse_pattern, score)

WORDS = [
    "spine", "tardy", "jumbo", "crane", "plane", "level", "lemon", "geese", "eerie",
    "there", "three", "where", "speed", "spice", "spike", "spent", "spoil", "belle",
    "llama", "allot", "total", "cloud", "world",
]


def _keep(guess, pattern, words=WORDS):
    return filter_candidates(CandidateSet(words), guess, parse_pattern(pattern)).to_list()


@pytest.mark.parametrize("guess,pattern,keeps,drops", [
    # CORRECT pins the letter to its slot
    ("crane", "GGGGG", ["crane"], ["plane", "spine"]),
    # MISPLACED: present, but not in this slot
    ("spent", "GGY--", ["spice", "spike"], ["spine", "spent", "speed", "spoil"]),
    # UNUSED with no credited copy: letter must be absent everywhere
    ("spine", "-----", ["tardy", "jumbo", "cloud", "world"], ["crane", "plane", "level"]),
])
def test_single_position_rules(guess, pattern, keeps, drops):
    out = _keep(guess, pattern)
    for w in keeps:
        assert w in out
    for w in drops:
        assert w not in out


def test_duplicate_letter_unused_copy_does_not_eliminate_single_copy():
    # "speed" against "spine": one 'e' is MISPLACED, the other UNUSED
    statuses = score("speed", "spine")
    assert statuses == parse_pattern("GGY--")
    out = _keep("speed", "GGY--")
    # one 'e', not in slot 2, no 'd'
    assert out == ["spine", "spice", "spike"]
    # words with zero 'e' are still eliminated by the MISPLACED copy
    assert "spoil" not in out


def test_duplicate_letter_correct_and_unused():
    # "level" against "lemon": second 'l' and 'e' are UNUSED but credited elsewhere
    assert score("level", "lemon") == parse_pattern("GG---")
    out = _keep("level", "GG---")
    assert "lemon" in out
    assert "level" not in out  # 'v' is uncredited and UNUSED


# Three copies of one letter in a single guess: an UNUSED copy never rejects
# a candidate for containing the letter as long as any other copy is credited.
@pytest.mark.parametrize("guess,answer,pattern,keeps,drops", [
    ("eerie", "there", "Y-Y-G", ["there", "where"], ["three", "eerie", "geese"]),
    ("geese", "spine", "---YG", ["spine", "spice", "spike"], ["geese", "speed", "eerie"]),
])
def test_triple_letter_pinned_cases(guess, answer, pattern, keeps, drops):
    assert score(guess, answer) == parse_pattern(pattern)
    out = _keep(guess, pattern)
    for w in keeps:
        assert w in out
    for w in drops:
        assert w not in out


def test_triple_letter_all_unused_removes_letter():
    out = _keep("eerie", "-----")
    assert all("e" not in w and "r" not in w and "i" not in w for w in out)
    assert out == ["jumbo", "llama", "allot", "total", "cloud"]


def test_soundness_answer_never_eliminated():
    for answer in WORDS:
        for guess in WORDS:
            out = filter_candidates(CandidateSet(WORDS), guess, score(guess, answer))
            assert answer in out, (guess, answer)


def test_monotonic_shrink_and_order_preserved():
    cs = CandidateSet(WORDS)
    for guess in ["spine", "tardy", "jumbo"]:
        nxt = filter_candidates(cs, guess, score(guess, "cloud"))
        assert len(nxt) <= len(cs)
        assert set(nxt) <= set(cs)
        order = [w for w in cs if w in nxt]
        assert nxt.to_list() == order
        cs = nxt
    assert "cloud" in cs


def test_filter_is_idempotent_and_pure():
    cs = CandidateSet(WORDS)
    st = score("speed", "spice")
    once = filter_candidates(cs, "speed", st)
    twice = filter_candidates(once, "speed", st)
    assert once.to_list() == twice.to_list()
    assert cs.to_list() == WORDS  # input untouched


def test_no_new_constraint_keeps_size():
    cs = CandidateSet(["tardy", "jumbo", "cloud"])
    out = filter_candidates(cs, "spine", parse_pattern("-----"))
    assert out.to_list() == cs.to_list()


@pytest.mark.parametrize("guess,statuses", [
    ("spine", parse_pattern("GG--")),
    ("spine", parse_pattern("GG----")),
    ("spin", parse_pattern("GG---")),
    ("SPINE", parse_pattern("GG---")),
    ("spine", ("G", "G", "-", "-", "-")),
])
def test_malformed_feedback_fails_fast(guess, statuses):
    with pytest.raises(MalformedFeedbackError):
        filter_candidates(CandidateSet(WORDS), guess, statuses)
    with pytest.raises(ValueError):  # MalformedFeedbackError is a ValueError
        is_consistent("spine", guess, statuses)


def test_is_consistent_matches_filter():
    st = (LetterStatus.CORRECT,) * 5
    assert is_consistent("crane", "crane", st) is True
    assert is_consistent("plane", "crane", st) is False


@pytest.mark.parametrize("candidate", ["abc", "spines", "SPINE", ""])
def test_non_word_candidate_is_never_consistent(candidate):
    assert is_consistent(candidate, "spine", parse_pattern("-----")) is False
    out = filter_candidates(CandidateSet([candidate, "jumbo"]), "spine", parse_pattern("-----"))
    assert out.to_list() == ["jumbo"]
