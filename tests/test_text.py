import pytest

from newstdlib.text import String

GREETING = "Bonjour, je suis Jean Guy ;) !!!"


def test_join_appends():
    s = String(GREETING)
    s.join("EZ")
    assert s.data() == GREETING + "EZ"


def test_append_is_join():
    s = String("ab")
    s.append(String("cd"))
    assert s.data() == "ab" + "cd"


def test_join_on_null_string():
    s = String()
    s.join("EZ")
    assert s.data() == "EZ"


def test_null_string_data_is_none_and_empty():
    s = String()
    assert s.data() is None
    assert s.empty()
    assert len(s) == 0


def test_empty_string_is_empty_but_not_null():
    s = String("")
    assert s.empty()
    assert s.data() == ""


def test_contains():
    s = String(GREETING)
    assert s.contains("Jean")
    assert not s.contains("Pierre")
    assert s.contains("")
    assert "Guy" in s


def test_compare_with_signs():
    assert String("abc").compare_with("abd") < 0
    assert String("abd").compare_with("abc") > 0
    assert String("abc").compare_with(String("abc")) == 0


def test_compare_n_bytes_with():
    s = String("abcX")
    assert s.compare_n_bytes_with("abcY", 3) == 0
    assert s.compare_n_bytes_with("abcY", 4) < 0
    assert s.is_n_byte_equal_with("abcZ", 3)


def test_compare_n_bytes_negative_raises():
    with pytest.raises(ValueError):
        String("a").compare_n_bytes_with("a", -1)


def test_is_equal_with():
    assert String("same").is_equal_with("same")
    assert not String("same").is_equal_with("other")


def test_replace_and_overwrite():
    s = String("old")
    s.replace("new")
    assert s.data() == "new"
    s.overwrite(String("newer"))
    assert s.data() == "newer"


def test_erase_removes_character():
    s = String("hello")
    s.erase(1)
    assert s.data() == "h" + "llo"
    assert len(s) == 4


def test_erase_past_end_is_noop():
    s = String("abc")
    s.erase(3)
    assert s.data() == "abc"


def test_erase_negative_raises():
    with pytest.raises(IndexError):
        String("abc").erase(-1)


def test_shuffle_keeps_characters():
    s = String(GREETING)
    s.shuffle()
    assert sorted(s.data()) == sorted(GREETING)


def test_swap_exchanges_contents():
    a = String("first")
    b = String()
    a.swap(b)
    assert a.data() is None
    assert b.data() == "first"


def test_at_first_last():
    s = String("xyz")
    assert s.at(1) == "y"
    assert s[0] == s.first() == "x"
    assert s.last() == "z"


def test_first_last_on_empty_raise():
    with pytest.raises(IndexError):
        String("").first()
    with pytest.raises(IndexError):
        String().last()


def test_at_out_of_range_raises():
    with pytest.raises(IndexError):
        String("ab").at(5)


def test_clear_makes_null():
    s = String("abc")
    s.clear()
    assert s.data() is None
    assert s.empty()


def test_ordering_operators():
    a, b = String("apple"), String("banana")
    assert a < b
    assert b > a
    assert a <= String("apple")
    assert a >= "apple"
    assert a == "apple"
    assert a != b


def test_addition_does_not_mutate():
    a = String("foo")
    result = a + "bar"
    assert result == "foo" + "bar"
    assert a == "foo"


def test_radd_with_str():
    assert ("pre" + String("fix")) == "pre" + "fix"


def test_iadd():
    s = String("a")
    s += "b"
    assert s.data() == "a" + "b"


def test_multiply_repeats():
    assert (String("ab") * 3).data() == "ab" * 3


def test_multiply_zero_keeps_one_copy():
    assert (String("ab") * 0).data() == "ab"


def test_multiply_negative_raises():
    with pytest.raises(ValueError):
        String("ab") * -1


def test_imul():
    s = String("z")
    s *= 4
    assert s.data() == "z" * 4


def test_copy_is_independent():
    a = String("orig")
    b = String(a)
    b.join("!")
    assert a.data() == "orig"


def test_bad_type_raises():
    with pytest.raises(TypeError):
        String(42)