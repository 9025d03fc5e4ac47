import pytest

from cubesteps import MoveToken, segment


SCRAMBLE = "D U F2 L2 U' B2 F2 D L2 U R' F' D R' F' U L D' F' D".split()


@pytest.mark.phases
def test_empty():
    assert segment([]) == []


@pytest.mark.phases
def test_twenty_moves_split_evenly():
    phases = segment(SCRAMBLE)
    assert [len(p.moves) for p in phases] == [5, 5, 5, 5]
    assert [p.name for p in phases] == [
        "Cross",
        "F2L (First Two Layers)",
        "OLL (Orient Last Layer)",
        "PLL (Permute Last Layer)",
    ]
    assert [str(m) for p in phases for m in p.moves] == SCRAMBLE


@pytest.mark.phases
def test_remainder_goes_to_last_phase():
    # ceil(7 / 4) = 2 -> 2, 2, 2, 1
    phases = segment(SCRAMBLE[:7])
    assert [len(p.moves) for p in phases] == [2, 2, 2, 1]


@pytest.mark.phases
@pytest.mark.parametrize("n, sizes", [(1, [1]), (3, [1, 1, 1]), (5, [2, 2, 1]), (9, [3, 3, 3])])
def test_empty_phases_dropped(n, sizes):
    phases = segment(SCRAMBLE[:n])
    assert [len(p.moves) for p in phases] == sizes
    assert phases[0].name == "Cross"


@pytest.mark.phases
def test_details_follow_moves():
    phases = segment(["R'", "D2", "Z"])
    details = [d for p in phases for d in p.move_details]
    assert details[0].axis == "x" and details[0].direction == -1
    assert details[1].turn_count == 2
    assert details[2] is None
    assert phases[0].moves == [MoveToken("R", "'")]


@pytest.mark.phases
def test_deterministic():
    first = [p.as_dict() for p in segment(SCRAMBLE)]
    second = [p.as_dict() for p in segment(SCRAMBLE)]
    assert first == second
    assert first[0]["moves"] == SCRAMBLE[:5]
    assert first[0]["move_details"][0] == {"axis": "y", "direction": -1, "turn_count": 1}
