import pytest
from wordsieve.engine import Word, feedback, is_solved


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("scoop", "scoop", "GGGGG"),
    ("crane", "crane", "GGGGG"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("trace", "crane", "-GGYG"),
    ("crane", "zonal", "--YY-"),
])
def test_feedback_n5_golden(guess, answer, expected):
    assert feedback(guess, answer) == expected


# --- duplicate-aware yellow assignment ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("kebab", "abbey", "-YGYY"),   # green 'b' consumes one copy, trailing 'b' gets the other
    ("speed", "abide", "--Y-Y"),   # only one 'e' in the answer: first 'e' yellow, second gray
    ("eerie", "crane", "--Y-G"),   # the green 'e' uses the only copy
    ("allee", "eagle", "YY-YG"),
    ("geese", "sheep", "-YGY-"),
])
def test_feedback_duplicates(guess, answer, expected):
    assert feedback(guess, answer) == expected


# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle", "letter", "-GGGYY"),
    ("little", "letter", "G-GG-Y"),
    ("planet", "palate", "GYY-YY"),
    ("kitten", "tinket", "YGYYGY"),
])
def test_feedback_n6_samples(guess, answer, expected):
    assert feedback(guess, answer) == expected


def test_feedback_accepts_words_and_rejects_length_mismatch():
    assert feedback(Word("trace"), Word("crane")) == "-GGYG"
    with pytest.raises(ValueError):
        feedback("crane", "cranes")


def test_is_solved():
    assert is_solved("GGGGG")
    assert not is_solved("GGGG-")
    assert not is_solved("")


def test_word_is_immutable_and_ordered():
    w = Word("geese")
    assert w.letter_counts == {"g": 1, "e": 3, "s": 1}
    assert w.has_repeats and w.distinct_letters == frozenset("ges")
    assert not Word("crane").has_repeats
    assert sorted([Word("trace"), Word("crane"), Word("zonal")]) == [
        Word("crane"), Word("trace"), Word("zonal")]
    with pytest.raises(AttributeError):
        w.text = "other"


@pytest.mark.parametrize("bad", ["Crane", "cr4ne", "", "cr ne", "crâne"])
def test_word_rejects_unclean_text(bad):
    with pytest.raises(ValueError):
        Word(bad)
