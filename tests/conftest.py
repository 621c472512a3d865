# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import vitewind.io as io
import vitewind.log as vitewind_log


@pytest.fixture(autouse=True)
def _default_console_patches(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(vitewind_log, "_configured_level", None)
    monkeypatch.setattr(vitewind_log, "_no_color_override", None)
    monkeypatch.delenv("VITEWIND_LOG_LEVEL", raising=False)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)
