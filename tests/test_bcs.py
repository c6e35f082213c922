import string

import pytest

from aspellkit import bcs


@pytest.mark.parametrize("ch", list(" \t"))
def test_isblank_true(ch):
    assert bcs.isblank(ch)


@pytest.mark.parametrize("ch", list("\n\rxA0\f"))
def test_isblank_false(ch):
    assert not bcs.isblank(ch)


def test_iseol():
    assert bcs.iseol("\n") and bcs.iseol("\r")
    assert not bcs.iseol(" ")


def test_isspace_matches_c_whitespace():
    for code in range(256):
        assert bcs.isspace(code) == (chr(code) in " \t\n\r\f\v")


def test_digit_and_case_predicates_match_ascii_sets():
    for code in range(256):
        ch = chr(code)
        assert bcs.isdigit(code) == (ch in string.digits)
        assert bcs.isupper(code) == (ch in string.ascii_uppercase)
        assert bcs.islower(code) == (ch in string.ascii_lowercase)
        assert bcs.isalpha(code) == (ch in string.ascii_letters)
        assert bcs.isalnum(code) == (ch in string.ascii_letters + string.digits)
        assert bcs.isxdigit(code) == (ch in string.hexdigits)


def test_non_ascii_is_not_a_letter():
    assert not bcs.isalpha("é")
    assert not bcs.isupper(0xC9)


def test_toupper_tolower_keep_type():
    assert bcs.toupper("a") == "A"
    assert bcs.tolower("Z") == "z"
    assert bcs.toupper(ord("q")) == ord("Q")
    assert bcs.tolower("é") == "é"
    assert bcs.toupper("5") == "5"


def test_case_roundtrip_over_all_bytes():
    for code in range(256):
        if bcs.islower(code):
            assert bcs.tolower(bcs.toupper(code)) == code
        if not bcs.isalpha(code):
            assert bcs.toupper(code) == code == bcs.tolower(code)


def test_invalid_character_arguments():
    with pytest.raises(ValueError):
        bcs.isspace(256)
    with pytest.raises(ValueError):
        bcs.isspace("ab")
    with pytest.raises(TypeError):
        bcs.isspace(1.5)


def test_strcasecmp_equal_ignoring_case():
    assert bcs.strcasecmp("Hello", "hELLO") == 0
    assert bcs.strcasecmp(b"UTF-8", b"utf-8") == 0
    assert bcs.strcasecmp("", "") == 0


def test_strcasecmp_ordering_is_antisymmetric():
    assert bcs.strcasecmp("abc", "abd") == -1
    assert bcs.strcasecmp("abd", "abc") == 1
    assert bcs.strcasecmp("ab", "abc") == -1
    assert bcs.strcasecmp("abc", "ab") == 1


def test_strcasecmp_stops_at_nul():
    assert bcs.strcasecmp("ab\0x", "AB\0y") == 0


def test_strncasecmp_limits_length():
    assert bcs.strncasecmp("abcdef", "ABCxyz", 3) == 0
    assert bcs.strncasecmp("abcdef", "ABCxyz", 4) == -1
    assert bcs.strncasecmp("x", "y", 0) == 0
    assert bcs.strncasecmp("ab", "AB", 10) == 0


def test_strncasecmp_negative():
    with pytest.raises(ValueError):
        bcs.strncasecmp("a", "b", -1)


def test_skip_ws():
    assert bcs.skip_ws(" \t\nword rest") == "word rest"
    assert bcs.skip_ws(b"  key") == b"key"
    assert bcs.skip_ws("   ") == ""


def test_skip_nonws():
    assert bcs.skip_nonws("key  value") == "  value"
    assert bcs.skip_nonws(b"token") == b""
    assert bcs.skip_nonws("ab\0 cd") == ""


def test_trunc_rws():
    assert bcs.trunc_rws("line \t\r\n") == "line"
    assert bcs.trunc_rws(b"x y  ") == b"x y"
    assert bcs.trunc_rws("\n\n") == ""


def test_convert_case_invariant():
    text = "Mixed Case 123 ÀÉ"
    assert bcs.convert_to_lower(bcs.convert_to_upper(text)) == bcs.convert_to_lower(text)
    assert bcs.strcasecmp(bcs.convert_to_upper(text), text) == 0