import pytest

from cubesteps import MoveToken, SolveFailure, SolveSuccess
from cubesteps.solver import solve

from conftest import FakeSolvingOracle


FACELETS = "DRLUUBFBRBLURRLRUBLRDDFDLFUFUFFDBRDUBRUFLLFDDBFLUBLRBD"


@pytest.mark.solver
def test_passes_facelets_unchanged():
    oracle = FakeSolvingOracle("R U2 F'")
    result = solve(FACELETS, oracle)
    assert oracle.calls == [FACELETS]
    assert isinstance(result, SolveSuccess)
    assert result.success is True
    assert result.moves == [MoveToken("R"), MoveToken("U", "2"), MoveToken("F", "'")]


@pytest.mark.solver
def test_whitespace_is_collapsed():
    result = solve(FACELETS, FakeSolvingOracle("  R   U'\n D2  "))
    assert result.solution == "R U' D2"
    assert result.moves_count == 3


@pytest.mark.solver
def test_empty_solution():
    result = solve(FACELETS, FakeSolvingOracle(""))
    assert result.success
    assert result.moves == []
    assert result.as_dict() == dict(success=True, solution="", moves=[], moves_count=0, phases=[])


@pytest.mark.solver
def test_failure_is_a_result():
    oracle = FakeSolvingOracle(ValueError("Error: Some edges are flipped"))
    result = solve(FACELETS, oracle)
    assert isinstance(result, SolveFailure)
    assert result.success is False
    assert result.error == "Error: Some edges are flipped"
    assert result.as_dict() == {"success": False, "error": "Error: Some edges are flipped"}
    assert len(oracle.calls) == 1


@pytest.mark.solver
def test_failure_without_message():
    result = solve(FACELETS, FakeSolvingOracle(RuntimeError()))
    assert result.error == "RuntimeError"


@pytest.mark.solver
def test_kociemba_oracle():
    pytest.importorskip("kociemba")
    from cubesteps.solver import KociembaOracle

    result = solve(FACELETS, KociembaOracle())
    assert result.success
    assert 0 < result.moves_count <= 25
    assert all(isinstance(m, MoveToken) for m in result.moves)
