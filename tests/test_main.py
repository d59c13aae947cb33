"""Tests for the command line driver."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import yaml

from raytuple.__main__ import main
from raytuple.sim.projectile import load_trajectory


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RAYTUPLE_CONFIG", raising=False)


def _write_config(path: Path, data: dict) -> Path:
    path.write_text(yaml.dump(data), encoding="utf-8")
    return path


class TestMain:
    def test_default_run_lands(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 17
        assert lines[0].startswith("Ticks: 1, Projectile Y position: ")
        assert float(lines[-1].rsplit(" ", 1)[1]) <= 0.0

    def test_missing_config_fails(self) -> None:
        assert main(["--config", "/nonexistent/config.yaml"]) == 1

    def test_invalid_config_fails(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path / "config.yaml", {"projectile": {"speed": -1}})
        assert main(["--config", str(path)]) == 1

    def test_tick_budget_exhausted_fails(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path / "config.yaml", {"max_ticks": 5})
        assert main(["--config", str(path)]) == 1

    def test_config_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = _write_config(tmp_path / "config.yaml", {"environment": {"gravity": [0.0, -1.0, 0.0]}})
        monkeypatch.setenv("RAYTUPLE_CONFIG", str(path))

        assert main([]) == 0
        assert len(capsys.readouterr().out.splitlines()) < 17

    def test_dump_writes_trajectory(self, tmp_path: Path) -> None:
        dump = tmp_path / "trajectory.msgpack"
        assert main(["--dump", str(dump)]) == 0

        states = load_trajectory(dump)
        # Initial state plus one per tick
        assert len(states) == 18
        assert states[-1].position.y <= 0.0

    def test_dump_written_on_failure(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path / "config.yaml", {"max_ticks": 2})
        dump = tmp_path / "partial.msgpack"
        assert main(["--config", str(path), "--dump", str(dump)]) == 1
        assert len(load_trajectory(dump)) == 3

    def test_unwritable_dump_fails(self, tmp_path: Path) -> None:
        dump = tmp_path / "missing_dir" / "trajectory.msgpack"
        assert main(["--dump", str(dump)]) == 1

    def test_unwritable_dump_after_failed_run(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path / "config.yaml", {"max_ticks": 2})
        dump = tmp_path / "missing_dir" / "partial.msgpack"
        assert main(["--config", str(path), "--dump", str(dump)]) == 1
