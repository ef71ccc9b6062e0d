import pytest

from dero.domain.assembler import assemble
from dero.domain.errors import DeromanizeError, ErrorKind
from dero.domain.hangul_compose import Block, decompose
from dero.domain.jamo import Final, Initial, Vowel


@pytest.mark.parametrize("text,expected", [
    ("ga", "가"),
    ("hangug", "한국"),
    ("annyeoxhaseyo", "안녕하세요"),
    ("saraxhae", "사랑해"),
    ("chingu", "친구"),
    ("Gachi", "까치"),
    ("a", "아"),
    ("ai", "아이"),
    ("oi", "오이"),
    ("gae", "개"),
    ("ilgeo", "일거"),
])
def test_words(text, expected):
    assert assemble(text) == expected


@pytest.mark.resyllabification
def test_consonant_before_vowel_opens_next_block():
    out = assemble("gasa")
    assert out == "가사"
    assert [decompose(ch) for ch in out] == [
        Block(Initial.G, Vowel.A),
        Block(Initial.S, Vowel.A),
    ]


@pytest.mark.resyllabification
def test_consonant_at_end_stays_final():
    assert assemble("gas") == "갓"
    assert decompose(assemble("gas")) == Block(Initial.G, Vowel.A, Final.S)


@pytest.mark.resyllabification
def test_compound_final_splits_before_vowel():
    out = assemble("ilgo")
    assert out == "일고"
    first, second = (decompose(ch) for ch in out)
    assert first == Block(Initial.IEUNG, Vowel.I, Final.L)
    assert second == Block(Initial.G, Vowel.O)


@pytest.mark.resyllabification
@pytest.mark.parametrize("text,expected", [
    ("ilg", "읽"),
    ("anja", "안자"),
    ("anj", "앉"),
    ("salhae", "살해"),
    ("gabs", "값"),
    ("gabsi", "갑시"),
    ("mogsi", "목시"),
    ("Gag", "깍"),
    ("baGa", "바까"),
])
def test_compound_and_simple_finals(text, expected):
    assert assemble(text) == expected


@pytest.mark.resyllabification
def test_final_followed_by_consonant_is_kept():
    assert assemble("gamsa") == "감사"
    assert assemble("hanbeon") == "한번"


def test_non_final_consonant_starts_next_block():
    # ㄸ can never be a final, so it opens the next syllable
    assert assemble("gaDa") == "가따"


def test_adjacent_vowels_do_not_merge_across_a_block():
    assert assemble("aa") == "아아"
    assert assemble("eoi") == "어이"


def test_punctuation_and_spaces_pass_through():
    assert assemble("ga, na!") == "가, 나!"
    assert assemble("  \t.?") == "  \t.?"


def test_hangul_and_digits_pass_through():
    assert assemble("한 2 ga") == "한 2 가"


def test_empty_input():
    assert assemble("") == ""
    assert assemble("", strict=False) == ""


# ---------------------------
# Strict errors
# ---------------------------

def test_strict_missing_vowel_reports_first_consonant():
    with pytest.raises(DeromanizeError) as info:
        assemble("kkk")
    assert info.value.kind is ErrorKind.MISSING_FINAL_VOWEL
    assert info.value.position == 0
    assert info.value.letter is None


def test_strict_missing_vowel_at_end():
    with pytest.raises(DeromanizeError) as info:
        assemble("gag ch")
    assert info.value.kind is ErrorKind.MISSING_FINAL_VOWEL
    assert info.value.position == 4


def test_strict_invalid_letter():
    with pytest.raises(DeromanizeError) as info:
        assemble("gaq")
    assert info.value.kind is ErrorKind.INVALID_LETTER
    assert info.value.position == 2
    assert info.value.letter == "q"


def test_strict_invalid_consonant():
    with pytest.raises(DeromanizeError) as info:
        assemble("ca")
    assert info.value.kind is ErrorKind.INVALID_CONSONANT
    assert info.value.position == 0
    assert info.value.letter == "c"


def test_strict_invalid_vowel_after_consonant():
    with pytest.raises(DeromanizeError) as info:
        assemble("gyx")
    assert info.value.kind is ErrorKind.INVALID_VOWEL
    assert info.value.position == 1
    assert info.value.letter == "y"


def test_strict_invalid_vowel_at_start():
    with pytest.raises(DeromanizeError) as info:
        assemble("w")
    assert info.value.kind is ErrorKind.INVALID_VOWEL
    assert info.value.position == 0


def test_error_positions_are_character_indices():
    text = "안녕 q"
    with pytest.raises(DeromanizeError) as info:
        assemble(text)
    assert info.value.position == 3
    assert text[info.value.position] == "q"
    assert info.value.byte_position(text) == 7


# ---------------------------
# Lenient mode
# ---------------------------

def test_lenient_lone_consonants_become_letters():
    assert assemble("kkk", strict=False) == "ㅋㅋㅋ"


def test_lenient_consonant_before_space():
    assert assemble("g a", strict=False) == "ㄱ 아"


def test_lenient_copies_unknown_letters():
    assert assemble("gaqa", strict=False) == "가q아"
    assert assemble("c", strict=False) == "c"
    assert assemble("ychi", strict=False) == "y치"


def test_lenient_matches_strict_on_valid_input():
    for text in ("hangug", "ilgo", "gasa", "annyeoxhaseyo ga"):
        assert assemble(text, strict=False) == assemble(text)
