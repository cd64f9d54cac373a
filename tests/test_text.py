import pytest

from kbdmodels.text import PreeditFace, Text


def test_defaults():
    text = Text()
    assert text.preedit == ""
    assert text.surrounding == ""
    assert text.primary_candidate == ""
    assert text.surrounding_offset == 0
    assert text.preedit_face is PreeditFace.DEFAULT
    assert text.cursor_position == 0


def test_set_preedit_cursor_defaults_to_end():
    text = Text()
    text.set_preedit("hello")
    assert text.preedit == "hello"
    assert text.cursor_position == len("hello")


@pytest.mark.parametrize("override", [-5, 99])
def test_set_preedit_out_of_range_cursor_goes_to_end(override):
    text = Text()
    text.set_preedit("word", override)
    assert text.cursor_position == len("word")


def test_set_preedit_with_valid_cursor():
    text = Text()
    text.set_preedit("word", 2)
    assert text.cursor_position == 2


def test_append_at_cursor():
    text = Text()
    text.set_preedit("held", 2)
    text.append_to_preedit("l")
    assert text.preedit == "helld"
    assert text.cursor_position == 3


def test_append_at_end():
    text = Text()
    text.set_preedit("ab")
    text.append_to_preedit("cd")
    assert text.preedit == "abcd"
    assert text.cursor_position == len("abcd")


def test_remove_from_preedit():
    text = Text()
    text.set_preedit("abcdef", 4)
    text.remove_from_preedit(2)
    assert text.preedit == "abef"
    assert text.cursor_position == 2


@pytest.mark.parametrize("length", [0, -1])
def test_remove_rejects_non_positive_length(length):
    text = Text()
    text.set_preedit("abc")
    with pytest.raises(ValueError):
        text.remove_from_preedit(length)
    assert text.preedit == "abc"


def test_remove_rejects_more_than_cursor():
    text = Text()
    text.set_preedit("abcdef", 1)
    with pytest.raises(ValueError):
        text.remove_from_preedit(2)
    assert text.preedit == "abcdef"
    assert text.cursor_position == 1


def test_remove_rejects_more_than_preedit():
    text = Text()
    text.set_preedit("ab")
    with pytest.raises(ValueError):
        text.remove_from_preedit(3)
    assert text.preedit == "ab"


def test_append_then_remove_round_trip():
    text = Text()
    text.set_preedit("start", 3)
    text.append_to_preedit("XYZ")
    text.remove_from_preedit(3)
    assert text.preedit == "start"
    assert text.cursor_position == 3


def test_commit_preedit():
    text = Text()
    text.set_preedit("commit me")
    text.primary_candidate = "commit"
    text.preedit_face = PreeditFace.ACTIVE
    text.commit_preedit()
    assert text.surrounding == "commit me"
    assert text.surrounding_offset == len("commit me")
    assert text.preedit == ""
    assert text.primary_candidate == ""
    assert text.preedit_face is PreeditFace.DEFAULT
    assert text.cursor_position == 0


def test_surrounding_split():
    text = Text(surrounding="hello world", surrounding_offset=5)
    assert text.surrounding_left() == "hello"
    assert text.surrounding_right() == " world"
    assert text.surrounding_left() + text.surrounding_right() == text.surrounding


def test_surrounding_offset_beyond_end():
    text = Text(surrounding="abc", surrounding_offset=10)
    assert text.surrounding_left() == "abc"
    assert text.surrounding_right() == ""