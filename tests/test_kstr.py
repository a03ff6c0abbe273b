import io

import pytest

from kutil.kstr import KStr, utf8_char_length

SAMPLES = ["", "abc", "héllo", "€uro", "a😀b", "日本語テキスト"]


@pytest.mark.parametrize("cp", [0x41, 0x7F, 0xE9, 0x7FF, 0x20AC, 0xFFFF, 0x1F600, 0x10FFFF])
def test_utf8_char_length_matches_encoding(cp):
    encoded = chr(cp).encode("utf-8")
    assert utf8_char_length(encoded[0]) == len(encoded)


def test_utf8_continuation_bytes_have_no_length():
    assert all(utf8_char_length(b) == 0 for b in range(0x80, 0xC0))


def test_utf8_char_length_rejects_out_of_range():
    with pytest.raises(ValueError):
        utf8_char_length(256)


@pytest.mark.parametrize("text", SAMPLES)
def test_counts_include_terminator(text):
    s = KStr(text)
    assert s.byte_count == len(text.encode("utf-8")) + 1
    assert s.char_count == len(text) + 1
    assert s.count_chars() == s.char_count
    assert s.at_start()
    assert s.last_char() == 0


def test_text_is_cut_at_nul():
    assert KStr("ab\0cd").byte_count == KStr("ab").byte_count
    assert KStr(b"ab\0cd").bytes_from_end() == b"ab"


@pytest.mark.parametrize("text", SAMPLES)
def test_next_visits_character_starts(text):
    s = KStr(text)
    positions = [s.pos()]
    while not s.at_end():
        s.next()
        positions.append(s.pos())
    encoded = text.encode("utf-8")
    starts = [len(text[:i].encode("utf-8")) for i in range(len(text) + 1)]
    assert positions == starts + [len(encoded) + 1]
    assert positions[-1] == s.byte_count


@pytest.mark.parametrize("text", SAMPLES)
def test_prev_undoes_next(text):
    s = KStr(text)
    forward = [s.pos()]
    while not s.at_end():
        s.next()
        forward.append(s.pos())
    backward = [s.pos()]
    while not s.at_start():
        s.prev()
        backward.append(s.pos())
    assert backward == list(reversed(forward))


def test_prev_at_start_stays():
    s = KStr("héllo")
    s.prev()
    assert s.pos() == 0


def test_next_by_and_prev_by():
    a, b = KStr("a😀b€"), KStr("a😀b€")
    a.next_by(3)
    for _ in range(3):
        b.next()
    assert a.pos() == b.pos()
    a.prev_by(2)
    b.prev()
    b.prev()
    assert a.pos() == b.pos()


def test_goto_pos_and_bounds():
    s = KStr("hello")
    s.goto_pos(2)
    assert s.pos() == 2
    assert not s.out_of_bounds()
    s.goto_pos(s.byte_count + 10)
    assert s.at_end()
    s.goto_start()
    assert s.at_start()
    s.goto_end()
    assert s.pos() == s.byte_count
    with pytest.raises(ValueError):
        s.goto_pos(-1)


def test_count_chars_keeps_position():
    s = KStr("héllo")
    s.next_by(2)
    before = s.pos()
    assert s.count_chars() == s.char_count
    assert s.pos() == before


def test_current_reads_byte_under_cursor():
    text = "héllo"
    s = KStr(text)
    s.next()
    assert s.current() == text.encode("utf-8")[s.pos()]
    s.goto_end()
    assert s.current() == 0


def test_bytes_from_rng():
    text = "hello world"
    s = KStr(text)
    assert s.bytes_from_rng(0, 10_000) == text.encode()
    assert s.bytes_from_rng(2, 4) == text.encode()[2:5]
    assert s.bytes_from_rng(6, 2) == text.encode()[2:3]
    with pytest.raises(ValueError):
        s.bytes_from_rng(-1, 3)


def test_bytes_from_start():
    text = "hello"
    s = KStr(text)
    assert s.bytes_from_start() == b""
    s.next_by(2)
    assert s.bytes_from_start() == text.encode()[: s.pos() + 1]


def test_bytes_from_end():
    text = "héllo"
    s = KStr(text)
    assert s.bytes_from_end() == text.encode("utf-8")
    s.next()
    assert s.bytes_from_end() == text[1:].encode("utf-8")
    s.goto_end()
    assert s.bytes_from_end() == b""


def test_dbg_output():
    s = KStr("héllo")
    out = io.StringIO()
    s.dbg(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "DEBUGGING: kstr"
    assert lines[1] == f"BYTE COUNT: {s.byte_count}"
    assert lines[2] == f"CHAR COUNT: {s.char_count}"
    assert lines[3] == f"POSITION: {s.pos()}"
    assert lines[4] == "STRING: héllo"