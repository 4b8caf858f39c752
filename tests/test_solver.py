"""
Testing the machine codebreaker against the real evaluator.
"""

import pytest

from mastermind.config import GameConfig
from mastermind.engine import Code, Feedback, evaluate
from mastermind.errors import Contradiction, IllegalState, InvalidArgument
from mastermind.solver import Solver

# Secrets that need a ninth guess with the first-consistent strategy (6 colors x 4 slots)
NINE_MOVE_SECRETS = {
    Code([4, 5, 4, 3]),
    Code([5, 3, 2, 4]),
    Code([5, 4, 4, 4]),
    Code([5, 4, 4, 5]),
    Code([5, 5, 4, 3]),
    Code([5, 5, 5, 4]),
}


def play(solver, secret, limit=20):
    """Let the solver break `secret`; return the guesses it made."""
    guesses = []
    while len(guesses) < limit:
        guess = solver.next_guess()
        guesses.append(guess)
        feedback = evaluate(secret, guess)
        solver.record_feedback(guess, feedback)
        if feedback.is_solved(len(secret)):
            break
    return guesses


def test_first_guess_is_all_zero():
    assert Solver().next_guess() == Code([0, 0, 0, 0])


def test_no_zero_left_after_blank_rating():
    solver = Solver()
    guess = solver.next_guess()
    solver.record_feedback(guess, Feedback(0, 0))

    space = solver.space
    for index in range(space.size()):
        if 0 in space.decode(index).pegs:
            assert space.is_possible(index) is False
        else:
            assert space.is_possible(index) is True
    assert solver.candidates_left() == 5 ** 4
    assert solver.next_guess() == Code([1, 1, 1, 1])


def test_survivors_are_consistent_with_rating():
    solver = Solver()
    secret = Code([2, 4, 1, 4])
    for _ in range(3):
        guess = solver.next_guess()
        feedback = evaluate(secret, guess)
        solver.record_feedback(guess, feedback)

        space = solver.space
        for index in space.possible_indices():
            assert evaluate(space.decode(index), guess) == feedback
        # the real secret is never thrown away
        assert space.is_possible(space.encode(secret))


def test_reference_guess_sequences():
    assert play(Solver(), Code([0, 1, 2, 3])) == [
        Code([0, 0, 0, 0]),
        Code([0, 1, 1, 1]),
        Code([0, 1, 2, 2]),
        Code([0, 1, 2, 3]),
    ]
    assert play(Solver(), Code([5, 5, 5, 4])) == [
        Code([0, 0, 0, 0]),
        Code([1, 1, 1, 1]),
        Code([2, 2, 2, 2]),
        Code([3, 3, 3, 3]),
        Code([4, 4, 4, 4]),
        Code([4, 5, 5, 5]),
        Code([5, 4, 5, 5]),
        Code([5, 5, 4, 5]),
        Code([5, 5, 5, 4]),
    ]


def test_every_secret_is_found():
    """Exhaustive run over all 1296 secrets."""
    space = Solver().space
    worst = 0
    total = 0
    slow = set()
    for index in range(space.size()):
        secret = space.decode(index)
        guesses = play(Solver(), secret)
        assert guesses[-1] == secret
        worst = max(worst, len(guesses))
        total += len(guesses)
        if len(guesses) > 8:
            slow.add(secret)

    assert worst == 9
    assert slow == NINE_MOVE_SECRETS
    assert round(total / space.size(), 3) == 5.765


def test_inconsistent_pair_raises_contradiction():
    solver = Solver()
    guess = solver.next_guess()  # 0 0 0 0
    # exactly one 0 in the secret
    solver.record_feedback(guess, Feedback(1, 0))
    guess = solver.next_guess()
    assert guess == Code([0, 1, 1, 1])
    # a guess holding a 0 cannot score nothing against a secret holding a 0
    solver.record_feedback(guess, Feedback(0, 0))

    assert solver.candidates_left() == 0
    with pytest.raises(Contradiction):
        solver.next_guess()


def test_impossible_rating_empties_space():
    solver = Solver()
    guess = solver.next_guess()
    # three in place and one misplaced can never happen with four slots
    solver.record_feedback(guess, Feedback(3, 1))
    assert solver.is_contradicted() is True
    with pytest.raises(Contradiction):
        solver.next_guess()


def test_rating_must_follow_a_guess():
    solver = Solver()
    with pytest.raises(IllegalState):
        solver.record_feedback(Code([0, 0, 0, 0]), Feedback(0, 0))


def test_only_last_guess_can_be_rated():
    solver = Solver()
    solver.next_guess()
    with pytest.raises(InvalidArgument):
        solver.record_feedback(Code([1, 1, 1, 1]), Feedback(0, 0))


def test_guess_twice_without_rating():
    solver = Solver()
    solver.next_guess()
    with pytest.raises(IllegalState):
        solver.next_guess()


def test_no_guess_after_solved():
    solver = Solver()
    guess = solver.next_guess()
    solver.record_feedback(guess, Feedback(4, 0))
    with pytest.raises(IllegalState):
        solver.next_guess()


def test_small_configuration():
    config = GameConfig(slots=3, colors=3, max_moves=10)
    space = Solver(config).space
    for index in range(space.size()):
        secret = space.decode(index)
        guesses = play(Solver(config), secret)
        assert guesses[-1] == secret
