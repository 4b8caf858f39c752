"""
Testing pure game logic.
"""

import pytest

from mastermind.config import GameConfig
from mastermind.engine import Code, Feedback, evaluate, is_win
from mastermind.errors import InvalidArgument


def test_evaluate_swapped_pair():
    secret = Code([0, 1, 2, 3])
    guess = Code([0, 1, 3, 2])

    result = evaluate(secret, guess)

    # 0 and 1 in place, 2 and 3 present but swapped
    assert result == Feedback(exact=2, partial=2)


def test_evaluate_with_duplicates_all_misplaced():
    secret = Code([1, 1, 2, 2])
    guess = Code([2, 2, 1, 1])

    assert evaluate(secret, guess) == Feedback(0, 4)


def test_evaluate_no_matches():
    assert evaluate(Code([0, 1, 2, 3]), Code([4, 5, 4, 5])) == Feedback(0, 0)


def test_evaluate_counts_each_color_once():
    # the secret has a single 1, so four 1s in the guess only earn one peg
    assert evaluate(Code([1, 0, 0, 0]), Code([1, 1, 1, 1])) == Feedback(1, 0)
    assert evaluate(Code([0, 1, 0, 0]), Code([1, 2, 1, 2])) == Feedback(0, 1)


def test_evaluate_same_code_is_all_black():
    code = Code([3, 3, 5, 0])
    assert evaluate(code, code) == Feedback(4, 0)


def test_evaluate_is_symmetric():
    pairs = [
        ([0, 0, 1, 1], [1, 0, 2, 0]),
        ([5, 4, 3, 2], [2, 3, 4, 5]),
        ([1, 2, 2, 2], [2, 1, 1, 1]),
    ]
    for a, b in pairs:
        assert evaluate(Code(a), Code(b)) == evaluate(Code(b), Code(a))
        assert Code(a).evaluate(Code(b)) == evaluate(Code(a), Code(b))


def test_evaluate_rejects_length_mismatch():
    with pytest.raises(InvalidArgument):
        evaluate(Code([0, 1, 2]), Code([0, 1, 2, 3]))


def test_is_win_true_and_false():
    assert is_win(Code([1, 2, 3, 4]), Code([1, 2, 3, 4])) is True
    assert is_win(Code([1, 2, 3, 4]), Code([1, 2, 3, 5])) is False


def test_code_parse_checks_length_and_colors():
    config = GameConfig(slots=4, colors=6)

    assert Code.parse([0, 5, 2, 1], config) == Code((0, 5, 2, 1))

    with pytest.raises(InvalidArgument):
        Code.parse([0, 1, 2], config)
    with pytest.raises(InvalidArgument):
        Code.parse([0, 1, 2, 6], config)
    with pytest.raises(InvalidArgument):
        Code.parse([0, -1, 2, 3], config)


def test_code_indexing_and_text():
    code = Code([4, 0, 2, 2])
    assert code[0] == 4
    assert code[3] == 2
    assert len(code) == 4
    assert list(code) == [4, 0, 2, 2]
    assert str(code) == "4 0 2 2"
    with pytest.raises(InvalidArgument):
        code[4]


def test_codes_are_values():
    assert Code([1, 2, 3, 4]) == Code((1, 2, 3, 4))
    assert len({Code([1, 2, 3, 4]), Code([1, 2, 3, 4])}) == 1


def test_feedback_validation():
    config = GameConfig(slots=4, colors=6)

    assert Feedback.parse(2, 2, config) == Feedback(2, 2)
    assert str(Feedback(1, 2)) == "black: 1 white: 2"

    with pytest.raises(InvalidArgument):
        Feedback(-1, 0)
    with pytest.raises(InvalidArgument):
        Feedback(0, -2)
    with pytest.raises(InvalidArgument):
        Feedback.parse(3, 2, config)


def test_feedback_is_solved():
    assert Feedback(4, 0).is_solved(4) is True
    assert Feedback(3, 0).is_solved(4) is False


def test_booleans_are_not_colors_or_pegs():
    with pytest.raises(InvalidArgument):
        Code.parse([True, 0, 0, 0])
    with pytest.raises(InvalidArgument):
        Code([False, 1, 2, 3])
    with pytest.raises(InvalidArgument):
        Feedback(True, False)
    with pytest.raises(InvalidArgument):
        Feedback(1, True)
