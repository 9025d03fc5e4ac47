import json

import pytest

import cubesteps
from cubesteps import Pipeline
from cubesteps.cli import main
from cubesteps.vision import FaceColorAcquirer, RandomFallback

from conftest import FakeSolvingOracle


@pytest.fixture
def fake_pipeline(monkeypatch):
    oracle = FakeSolvingOracle("F2 B'")

    def build():
        return Pipeline(solving_oracle=oracle, acquirer=FaceColorAcquirer(None, RandomFallback(0)))

    monkeypatch.setattr(cubesteps, "Pipeline", build)
    return oracle


@pytest.mark.cli
def test_state(fake_pipeline, solved_state, capsys):
    assert main(["--state", json.dumps(solved_state)]) == 0
    assert "F2 B'" in capsys.readouterr().out
    assert len(fake_pipeline.calls) == 1


@pytest.mark.cli
def test_rejected_state(fake_pipeline, solved_state, capsys):
    del solved_state["D"]
    assert main(["--state", json.dumps(solved_state)]) == 1
    assert "Missing face D" in capsys.readouterr().err
    assert fake_pipeline.calls == []


@pytest.mark.cli
def test_images(fake_pipeline, tmp_path):
    args = []
    for face in "URFDLB":
        path = tmp_path / f"{face.lower()}.jpg"
        path.write_bytes(b"jpg")
        args += ["-i", f"{face}={path}"]

    assert main(args) == 0
    assert (tmp_path / "u.jpg").exists()

    assert main(args + ["--consume-images"]) == 0
    assert not (tmp_path / "u.jpg").exists()


@pytest.mark.cli
def test_bad_image_argument(fake_pipeline):
    with pytest.raises(SystemExit):
        main(["-i", "nopath"])
