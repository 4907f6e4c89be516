"""End-to-end run of the demo entry point."""

import logging
from pathlib import Path

import pytest

import main
from conftest import ANNIKA, KATHARINA, RENE, SAMUEL, VAL
from graph import children, spouses
from settings import FamgridSettings


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers


class TestBuildDemoStore:
    def test_people_and_relations(self) -> None:
        store = main.build_demo_store(FamgridSettings())
        assert [p.name for p in store] == ["Rene", "Katharina", "Samuel", "Val", "Annika"]
        assert spouses(store, RENE) == [KATHARINA]
        assert children(store, KATHARINA) == [SAMUEL, VAL, ANNIKA]

    def test_capacity_from_settings(self) -> None:
        store = main.build_demo_store(FamgridSettings(capacity=8))
        assert store.capacity == 8


class TestMain:
    def test_runs_and_saves_plot(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        out = tmp_path / "tree.png"
        monkeypatch.setenv("FAMGRID_OUTPUT_PATH", str(out))
        main.main()

        stdout = capsys.readouterr().out
        assert "No validation issues found" in stdout
        assert "Val" in stdout
        assert "Done!" in stdout
        assert out.exists()
