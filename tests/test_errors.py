import pytest

from dero.domain.errors import DeromanizeError, ErrorKind


@pytest.mark.parametrize("kind,letter,message", [
    (ErrorKind.INVALID_CONSONANT, "c", "Expected a valid consonant at position 3, found 'c'"),
    (ErrorKind.INVALID_VOWEL, "y", "Expected a valid vowel at position 3, found 'y'"),
    (ErrorKind.INVALID_LETTER, "q", "Expected a valid consonant or vowel at position 3, found 'q'"),
    (ErrorKind.MISSING_FINAL_VOWEL, None, "Expected a vowel at position 3"),
])
def test_messages_are_one_based(kind, letter, message):
    assert str(DeromanizeError(kind, 2, letter)) == message


def test_offset_returns_moved_copy():
    err = DeromanizeError(ErrorKind.INVALID_LETTER, 2, "q")
    moved = err.offset(5)
    assert moved.position == 7
    assert moved.kind is ErrorKind.INVALID_LETTER
    assert moved.letter == "q"
    assert err.position == 2
    assert "position 8" in str(moved)


def test_is_a_value_error():
    assert issubclass(DeromanizeError, ValueError)


def test_byte_position_counts_encoded_prefix():
    text = "한국 q"
    err = DeromanizeError(ErrorKind.INVALID_LETTER, 3, "q")
    assert err.byte_position(text) == 7
    assert text.encode("utf-8")[err.byte_position(text):] == b"q"
