from hypothesis import given
from hypothesis import strategies as st

from algokit.brackets import are_brackets_balanced, bracket_precedence

brackets = st.text(alphabet="[]{}()", max_size=12)
plain = st.text(alphabet="abc+-* 123", max_size=8)


def test_precedence_pairs_match():
    for opening, closing in ("[]", "{}", "()"):
        assert bracket_precedence(opening) == bracket_precedence(closing)
    assert bracket_precedence("[") < bracket_precedence("{") < bracket_precedence("(")


def test_precedence_of_other_characters():
    assert bracket_precedence("a") == 0


def test_source_example_is_balanced():
    assert are_brackets_balanced("[{()}]")


def test_lower_precedence_inside_higher_is_rejected():
    assert not are_brackets_balanced("([])")


def test_mismatch_and_unclosed():
    assert not are_brackets_balanced("(]")
    assert not are_brackets_balanced("(")
    assert not are_brackets_balanced(")")


@given(plain)
def test_text_without_brackets_is_balanced(text):
    assert are_brackets_balanced(text)


@given(brackets, brackets)
def test_concatenation_of_balanced_is_balanced(left, right):
    if are_brackets_balanced(left) and are_brackets_balanced(right):
        assert are_brackets_balanced(left + right)
    else:
        assert not (are_brackets_balanced(left) and are_brackets_balanced(right))


@given(brackets)
def test_wrapping_balanced_in_square_keeps_balance(expr):
    assert are_brackets_balanced("[" + expr + "]") == are_brackets_balanced(expr)