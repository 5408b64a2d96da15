from hypothesis import given
from hypothesis import strategies as st

from twopointers.text import is_palindrome, length_of_longest_substring

short_text = st.text(alphabet="abcde", max_size=30)


def test_longest_substring_example():
    assert length_of_longest_substring("abcabcbb") == 3


def test_longest_substring_edges():
    assert length_of_longest_substring("") == 0
    assert length_of_longest_substring("bbbbb") == 1


@given(short_text)
def test_longest_substring_bounds(s):
    result = length_of_longest_substring(s)
    assert result <= len(set(s))
    assert result >= min(1, len(s))


@given(st.text(alphabet="abcdefghij", max_size=10, min_size=1))
def test_longest_substring_of_distinct_text(s):
    distinct = "".join(dict.fromkeys(s))
    assert length_of_longest_substring(distinct) == len(distinct)


def test_palindrome_examples():
    assert is_palindrome("A man, a plan, a canal: Panama") is True
    assert is_palindrome("race a car") is False


def test_palindrome_ignores_non_ascii():
    assert is_palindrome("\u00e9a") is True


@given(st.text(max_size=20))
def test_mirrored_text_is_palindrome(s):
    assert is_palindrome(s + s[::-1]) is True


def test_empty_and_punctuation_only():
    assert is_palindrome("") is True
    assert is_palindrome(" ,.!") is True