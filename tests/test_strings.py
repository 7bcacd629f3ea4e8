import pytest

from ftkit.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

LOREM = "lorem ipsum dolor sit amet"


def test_strlen_matches_len():
    assert strlen("") == 0
    assert strlen(LOREM) == len(LOREM)


def test_strchr_finds_first_occurrence():
    index = strchr(LOREM, "o")
    assert LOREM[index] == "o"
    assert "o" not in LOREM[:index]


def test_strchr_accepts_integer_code():
    assert strchr("hola", ord("l")) == strchr("hola", "l")


def test_strchr_terminator_and_missing():
    assert strchr("hola", "\0") == len("hola")
    assert strchr("hola", "z") is None


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("hola", "ho")


def test_strrchr_finds_last_occurrence():
    index = strrchr(LOREM, "o")
    assert LOREM[index] == "o"
    assert "o" not in LOREM[index + 1:]


def test_strrchr_terminator_and_missing():
    assert strrchr("hola", 0) == len("hola")
    assert strrchr("hola", "q") is None


def test_strncmp_equal_and_zero_count():
    assert strncmp("abcdef", "abcdef", 6) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_ignores_beyond_count():
    assert strncmp("abcdef", "abc\375xx", 3) == 0


def test_strncmp_reports_code_difference():
    assert strncmp("abcdef", "abc\375xx", 5) == ord("d") - ord("\375")
    assert strncmp("abcdef", "abc\375xx", 5) < 0


def test_strncmp_shorter_string_counts_as_nul():
    assert strncmp("abc", "abcd", 4) == -ord("d")
    assert strncmp("abcd", "abc", 10) == ord("d")


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_finds_needle():
    index = strnstr(LOREM, "dolor", len(LOREM))
    assert LOREM[index:index + len("dolor")] == "dolor"


def test_strnstr_respects_length():
    index = LOREM.find("dolor")
    assert strnstr(LOREM, "dolor", index + len("dolor") - 1) is None
    assert strnstr(LOREM, "dolor", index + len("dolor")) == index


def test_strnstr_empty_needle_and_missing():
    assert strnstr("hola", "", 0) == 0
    assert strnstr("hola", "xyz", len("hola")) is None


def test_strdup_copies():
    assert strdup("hola") == "hola"
    assert strdup("") == ""


def test_strjoin_concatenates():
    joined = strjoin("lorem ", "ipsum")
    assert joined.startswith("lorem ")
    assert joined.endswith("ipsum")
    assert len(joined) == len("lorem ") + len("ipsum")


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "a")


def test_substr_start_beyond_end():
    assert substr("hola", 4294967295, 0) == ""
    assert substr("hola", 5, 2) == ""


def test_substr_clamps_length():
    assert substr("hola", 1, 2) == "ol"
    assert substr("hola", 2, 100) == "la"
    assert substr("hola", 4, 3) == ""


def test_substr_negative_arguments():
    with pytest.raises(ValueError):
        substr("hola", -1, 2)


def test_strtrim_strips_both_ends():
    assert strtrim(LOREM, "te") == "lorem ipsum dolor sit am"
    assert strtrim("xxholaxx", "x") == "hola"


def test_strtrim_edge_cases():
    assert strtrim("aaaa", "a") == ""
    assert strtrim(" hola ", "") == " hola "


def test_split_drops_empty_pieces():
    assert split("a,,b,", ",") == ["a", "b"]
    assert split(",,lorem,,ipsum", ",") == ["lorem", "ipsum"]


def test_split_empty_and_only_separators():
    assert split("", ".") == []
    assert split("....", ".") == []


def test_split_pieces_contain_no_separator():
    pieces = split(LOREM, " ")
    assert all(" " not in piece for piece in pieces)
    assert " ".join(pieces) == LOREM


def test_strmapi_passes_index_and_char():
    assert strmapi("hola", lambda num, ch: chr(ord(ch) + num)) == "hpnd"
    assert strmapi("hola", lambda num, ch: ch) == "hola"


def test_striteri_replaces_in_place():
    buf = list("hola")
    result = striteri(buf, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert result is buf
    assert "".join(buf) == "HoLa"


def test_striteri_sees_every_index():
    seen = []
    striteri(bytearray(b"abc"), lambda i, b: seen.append(i))
    assert seen == list(range(len(b"abc")))


def test_strlcpy_truncates_and_terminates():
    dest = bytearray(10)
    result = strlcpy(dest, b"hello world", 5)
    assert result == len(b"hello world")
    assert dest[:5] == b"hell\0"


def test_strlcpy_full_copy():
    dest = bytearray(20)
    assert strlcpy(dest, b"hola", 20) == len(b"hola")
    assert dest[:5] == b"hola\0"


def test_strlcpy_zero_size_leaves_dest():
    dest = bytearray(b"xyz")
    assert strlcpy(dest, b"hola", 0) == len(b"hola")
    assert dest == bytearray(b"xyz")


def test_strlcpy_size_larger_than_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(3), b"hola", 4)


def test_strlcat_appends():
    dest = bytearray(b"ab\0" + bytes(7))
    assert strlcat(dest, b"cd", 10) == len(b"ab") + len(b"cd")
    assert dest[:5] == b"abcd\0"


def test_strlcat_truncates():
    dest = bytearray(b"ab\0" + bytes(7))
    assert strlcat(dest, b"cdefgh", 5) == len(b"ab") + len(b"cdefgh")
    assert dest[:5] == b"abcd\0"


def test_strlcat_size_not_above_dest_length():
    dest = bytearray(b"lorem\0\0\0")
    assert strlcat(dest, b"ipsum", 3) == 3 + len(b"ipsum")
    assert dest == bytearray(b"lorem\0\0\0")