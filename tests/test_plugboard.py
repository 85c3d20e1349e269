import logging

import pytest

from enigmalab.machine.alphabet import to_symbol
from enigmalab.machine.errors import PlugBoardError
from enigmalab.machine.plugboard import PlugBoard


def test_add_mapping_basic():
    pb = PlugBoard()
    pb.add_mapping("A", "B")

    assert pb.map(to_symbol("A")) == to_symbol("B")
    assert pb.map(to_symbol("B")) == to_symbol("A")
    assert len(pb) == 1


def test_add_mapping_is_case_insensitive():
    pb = PlugBoard()
    pb.add_mapping("a", "B")

    assert pb.is_wired("A")
    assert pb.is_wired("b")
    assert pb.pairs() == [("A", "B")]


@pytest.mark.parametrize("a,b", [("2", "B"), ("A", ","), ("é", "B"), ("AB", "C"), ("", "C")])
def test_add_mapping_invalid_input(a, b):
    pb = PlugBoard()
    with pytest.raises(PlugBoardError):
        pb.add_mapping(a, b)
    assert len(pb) == 0


def test_duplicate_mapping_rejected_and_first_kept(caplog):
    pb = PlugBoard()
    pb.add_mapping("A", "B")

    with caplog.at_level(logging.WARNING):
        with pytest.raises(PlugBoardError, match="Duplicate"):
            pb.add_mapping("A", "C")

    assert "Duplicate" in caplog.text
    assert pb.map(to_symbol("A")) == to_symbol("B")
    assert pb.map(to_symbol("B")) == to_symbol("A")
    assert pb.map(to_symbol("C")) == to_symbol("C")


def test_duplicate_on_second_letter_rejected():
    pb = PlugBoard()
    pb.add_mapping("A", "B")
    with pytest.raises(PlugBoardError):
        pb.add_mapping("C", "b")
    assert not pb.is_wired("C")


def test_self_mapping_rejected():
    with pytest.raises(PlugBoardError):
        PlugBoard().add_mapping("Q", "q")


def test_unwired_ports_pass_through():
    pb = PlugBoard.with_mappings([("A", "B"), ("C", "D")])
    for letter in "EFGXYZ":
        assert pb.map(to_symbol(letter)) == to_symbol(letter)


def test_with_mappings_percolates_errors():
    with pytest.raises(PlugBoardError):
        PlugBoard.with_mappings([("A", ","), ("C", "D")])


def test_pairs_sorted_one_per_cable():
    pb = PlugBoard.with_mappings([("Z", "Y"), ("c", "a")])
    assert pb.pairs() == [("A", "C"), ("Y", "Z")]
    assert repr(pb) == "<PlugBoard AC YZ>"
