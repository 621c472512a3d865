from __future__ import annotations

from pathlib import Path

from vitewind.exec import CommandRequest, CommandResult


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def _record(self, level: str, message: str) -> None:
        self.records.append((level, message))

    def debug(self, message: str) -> None:
        self._record("debug", message)

    def info(self, message: str) -> None:
        self._record("info", message)

    def progress(self, message: str) -> None:
        self._record("progress", message)

    def success(self, message: str) -> None:
        self._record("success", message)

    def warning(self, message: str) -> None:
        self._record("warning", message)

    def error(self, message: str) -> None:
        self._record("error", message)

    def messages(self, level: str) -> list[str]:
        return [message for recorded, message in self.records if recorded == level]


class FakeRunner:
    """Records requests and mimics the external tools' filesystem effects.

    ``fail_on`` fails the first command whose text contains the substring.
    """

    def __init__(self, *, fail_on: str | None = None, stderr: str = "boom") -> None:
        self.requests: list[CommandRequest] = []
        self.fail_on = fail_on
        self.stderr = stderr

    @property
    def commands(self) -> list[str]:
        return [request.command_text for request in self.requests]

    def run(self, request: CommandRequest) -> CommandResult | None:
        self.requests.append(request)
        text = request.command_text
        if self.fail_on is not None and self.fail_on in text:
            return CommandResult(argv=request.argv, returncode=1, stdout="", stderr=self.stderr)
        if "create vite" in text and request.cwd is not None:
            _fake_vite_project(request.cwd / request.argv[3], "--template react-ts" in text)
        if "tailwindcss init" in text and request.cwd is not None:
            (request.cwd / "tailwind.config.js").write_text("module.exports = {}\n")
            (request.cwd / "postcss.config.js").write_text("module.exports = {}\n")
        return CommandResult(argv=request.argv, returncode=0, stdout="", stderr="")


def _fake_vite_project(path: Path, typescript: bool) -> None:
    ext = "ts" if typescript else "js"
    src = path / "src"
    src.mkdir(parents=True)
    (path / "index.html").write_text("<div id='root'></div>\n")
    (src / f"main.{ext}x").write_text("import './index.css'\n")
    (src / f"App.{ext}x").write_text("export default function App() {}\n")
    (src / "App.css").write_text(".generated {}\n")
    (src / "index.css").write_text(":root {}\n")


def yes_which(name: str) -> str | None:
    return f"/usr/bin/{name}"
