"""
Testing the candidate space: index <-> code mapping and elimination bookkeeping.
"""

import pytest

from mastermind.candidates import CandidateSpace
from mastermind.config import GameConfig
from mastermind.engine import Code
from mastermind.errors import InvalidArgument


def test_size_is_colors_to_the_slots():
    assert CandidateSpace().size() == 1296
    assert len(CandidateSpace(GameConfig(slots=3, colors=4))) == 64


def test_decode_most_significant_slot_first():
    space = CandidateSpace()
    assert space.decode(0) == Code([0, 0, 0, 0])
    assert space.decode(1) == Code([0, 0, 0, 1])
    assert space.decode(6) == Code([0, 0, 1, 0])
    assert space.decode(51) == Code([0, 1, 2, 3])
    assert space.decode(1295) == Code([5, 5, 5, 5])


def test_encode_decode_round_trip():
    space = CandidateSpace()
    for index in range(space.size()):
        assert space.encode(space.decode(index)) == index


def test_out_of_range_index():
    space = CandidateSpace()
    with pytest.raises(InvalidArgument):
        space.decode(1296)
    with pytest.raises(InvalidArgument):
        space.is_possible(-1)
    with pytest.raises(InvalidArgument):
        space.encode(Code([0, 0, 6, 0]))


def test_eliminate_is_idempotent():
    space = CandidateSpace()
    assert space.is_possible(10) is True

    space.eliminate(10)
    space.eliminate(10)

    assert space.is_possible(10) is False
    assert space.remaining() == 1295


def test_first_possible_skips_eliminated():
    space = CandidateSpace()
    assert space.first_possible() == 0

    space.eliminate(0)
    space.eliminate(1)
    space.eliminate(3)
    assert space.first_possible() == 2

    space.eliminate(2)
    assert space.first_possible() == 4


def test_first_possible_on_empty_space():
    space = CandidateSpace(GameConfig(slots=2, colors=2))
    for index in range(space.size()):
        space.eliminate(index)
    assert space.first_possible() is None
    assert space.remaining() == 0


def test_possible_indices_ascending():
    space = CandidateSpace(GameConfig(slots=2, colors=3))
    space.eliminate(4)
    space.eliminate(0)
    assert list(space.possible_indices()) == [1, 2, 3, 5, 6, 7, 8]
