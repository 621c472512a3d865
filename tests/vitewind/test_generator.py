from pathlib import Path

import pytest

from tests.vitewind.helpers import FakeRunner, RecordingLogger
from vitewind.config import ScaffoldSettings, load_settings
from vitewind.generator import ProjectGenerator
from vitewind.models import Language, ProjectConfig
from vitewind.services import ExternalCommandFailedError


def test_create_project_runs_generator_with_template(tmp_path: Path) -> None:
    runner = FakeRunner()
    logger = RecordingLogger()
    generator = ProjectGenerator(load_settings({}), logger, runner)
    config = ProjectConfig(project_name="demo-app", language=Language.TYPESCRIPT)

    project_path = generator.create_project(config, tmp_path)

    assert project_path == (tmp_path / "demo-app").resolve()
    assert project_path.is_absolute()
    assert runner.commands == ["npm create vite@latest demo-app -- --template react-ts"]
    assert runner.requests[0].cwd == tmp_path
    assert logger.messages("success") == ["Vite project created successfully"]


def test_install_dependencies_runs_base_then_tailwind(tmp_path: Path) -> None:
    runner = FakeRunner()
    settings = ScaffoldSettings(command_timeout=60)
    generator = ProjectGenerator(settings, RecordingLogger(), runner)

    generator.install_dependencies(tmp_path)

    assert runner.commands == [
        "npm install",
        "npm install -D tailwindcss@3 postcss autoprefixer",
    ]
    assert all(request.cwd == tmp_path for request in runner.requests)
    assert all(request.timeout_seconds == 60 for request in runner.requests)


def test_install_dependencies_stops_after_base_failure(tmp_path: Path) -> None:
    runner = FakeRunner(fail_on="npm install")
    logger = RecordingLogger()
    generator = ProjectGenerator(load_settings({}), logger, runner)

    with pytest.raises(ExternalCommandFailedError, match="Failed to install base dependencies"):
        generator.install_dependencies(tmp_path)

    assert runner.commands == ["npm install"]
    assert logger.messages("success") == []


def test_create_project_failure_is_reported(tmp_path: Path) -> None:
    runner = FakeRunner(fail_on="create vite", stderr="404 Not Found")
    logger = RecordingLogger()
    generator = ProjectGenerator(load_settings({}), logger, runner)

    with pytest.raises(ExternalCommandFailedError, match="Failed to create Vite project"):
        generator.create_project(ProjectConfig(project_name="demo-app"), tmp_path)

    assert "Error: 404 Not Found" in logger.messages("error")


def test_generator_honours_configured_tools(tmp_path: Path) -> None:
    runner = FakeRunner()
    settings = load_settings({"VITEWIND_VITE_VERSION": "5.4.0", "VITEWIND_NPM": "npm10"})
    generator = ProjectGenerator(settings, RecordingLogger(), runner)

    generator.create_project(ProjectConfig(project_name="demo-app"), tmp_path)

    assert runner.commands == ["npm10 create vite@5.4.0 demo-app -- --template react"]


def test_settings_overrides_reach_install_commands(tmp_path: Path) -> None:
    runner = FakeRunner()
    settings = load_settings(
        {
            "VITEWIND_COMMAND_TIMEOUT": "90",
            "VITEWIND_TAILWIND_PACKAGES": "tailwindcss@3.4.4 postcss@8 autoprefixer",
        }
    )
    generator = ProjectGenerator(settings, RecordingLogger(), runner)

    generator.create_project(ProjectConfig(project_name="demo-app"), tmp_path)
    generator.install_dependencies(tmp_path / "demo-app")

    assert runner.commands[-1] == "npm install -D tailwindcss@3.4.4 postcss@8 autoprefixer"
    assert [request.timeout_seconds for request in runner.requests] == [90.0, 90.0, 90.0]


def test_vite_version_stays_a_single_argument(tmp_path: Path) -> None:
    runner = FakeRunner()
    settings = load_settings({"VITEWIND_VITE_VERSION": "latest other"})
    generator = ProjectGenerator(settings, RecordingLogger(), runner)

    project_path = generator.create_project(ProjectConfig(project_name="demo-app"), tmp_path)

    assert runner.requests[0].argv[:4] == ("npm", "create", "vite@latest other", "demo-app")
    assert project_path == (tmp_path / "demo-app").resolve()
