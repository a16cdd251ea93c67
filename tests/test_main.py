import pytest

pytest.importorskip("PyQt5")

from pathlib import Path

from bezier_viewer import main as main_module
from bezier_viewer.config import CONFIG_FILENAME


class _Signal:
    def __init__(self) -> None:
        self.slots = []

    def connect(self, slot) -> None:
        self.slots.append(slot)


class _FakeApp:
    created = []

    def __init__(self, argv) -> None:
        self.argv = argv
        self.window = None
        self.aboutToQuit = _Signal()
        _FakeApp.created.append(self)

    def exec_(self) -> int:
        return 0


class _FakeWindow:
    def __init__(self, settings) -> None:
        self.settings = settings
        self.shown = False

    def show(self) -> None:
        self.shown = True

    def close(self) -> None:
        pass


def test_main_passes_argv_to_application(tmp_path: Path, monkeypatch) -> None:
    ini_path = tmp_path / CONFIG_FILENAME
    ini_path.write_text("[animation]\nsteps = 30\n", encoding="utf-8")
    _FakeApp.created = []
    monkeypatch.setattr(main_module, "BezierViewerApp", _FakeApp)
    monkeypatch.setattr(main_module, "bootstrap_window", _FakeWindow)
    monkeypatch.setattr(main_module, "configure_logging", lambda level, path: "log.txt")

    argv = ["--config", str(ini_path), "--debug"]
    with pytest.raises(SystemExit) as excinfo:
        main_module.main(argv)

    assert excinfo.value.code == 0
    app = _FakeApp.created[0]
    assert app.argv[1:] == argv
    assert app.window.shown
    assert app.window.settings.steps == 30
    assert len(app.aboutToQuit.slots) == 1
