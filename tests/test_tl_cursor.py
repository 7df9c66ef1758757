import pytest

from tlproto.tl_cursor import Cursor


def test_read_at_stops_before_delimiter():
    cur = Cursor("abc def")
    assert cur.read_at(" ") == "abc"
    assert cur.read_at(" ") == ""


def test_read_at_raises_on_missing_delimiter():
    cur = Cursor("abc")
    with pytest.raises(EOFError):
        cur.read_at("z")


def test_read_at_finds_last_character():
    cur = Cursor("abc;")
    assert cur.read_at(";") == "abc"


def test_skip_spaces_moves_to_next_text():
    cur = Cursor("   \n\txy")
    cur.skip_spaces()
    assert cur.read_symbol() == "x"


def test_skip_spaces_stops_on_last_space():
    cur = Cursor("   ")
    cur.skip_spaces()
    assert cur.read_at(" ") == ""


def test_skip_spaces_on_empty_source_raises():
    with pytest.raises(EOFError):
        Cursor("").skip_spaces()


def test_read_digits():
    cur = Cursor("123abc")
    assert cur.read_digits() == "123"
    assert cur.read_at("c") == "ab"


def test_read_digits_without_digits_is_empty():
    cur = Cursor("abc")
    assert cur.read_digits() == ""
    assert cur.read_symbol() == "a"


def test_read_digits_at_end_raises():
    with pytest.raises(EOFError):
        Cursor("123").read_digits()


def test_is_next_restores_position_on_mismatch():
    cur = Cursor("hello world")
    assert cur.is_next("help") is False
    assert cur.read_at(" ") == "hello"


def test_is_next_consumes_on_match():
    cur = Cursor("hello world")
    assert cur.is_next("hello") is True
    assert cur.read_symbol() == " "
    assert cur.read_at("d") == "worl"


def test_unread_clamps_at_start():
    cur = Cursor("abcdef")
    cur.skip(2)
    assert cur.read_symbol() == "c"
    cur.unread(10)
    assert cur.read_symbol() == "a"


def test_skip_clamps_at_last_character():
    cur = Cursor("abcdef")
    cur.skip(100)
    assert cur.read_at("f") == ""
    with pytest.raises(EOFError):
        cur.read_symbol()