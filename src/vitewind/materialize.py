"""Writes the Tailwind setup and demo files into a generated project.

Each write replaces whatever the generator produced at that path; nothing
is merged or backed up.
"""

from __future__ import annotations

import shlex
from pathlib import Path

from . import templates
from .config import ScaffoldSettings
from .exec import CommandRunner, command_request, run_step
from .log import Logger
from .models import Language, ProjectConfig
from .services.errors import IoFailedError


def write_file(path: Path, content: str) -> Path:
    """Overwrite ``path`` with ``content``, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise IoFailedError(f"Failed to write {path}: {exc}") from exc
    return path


def app_component_path(project_path: Path, language: Language) -> Path:
    return project_path / "src" / f"App.{language.component_extension}"


class FileMaterializer:
    """Applies the fixed file set to one generated project."""

    def __init__(
        self,
        settings: ScaffoldSettings,
        logger: Logger,
        runner: CommandRunner | None = None,
    ) -> None:
        self._settings = settings
        self._logger = logger
        self._runner = runner

    def setup_tailwind(self, project_path: Path) -> None:
        """Run the Tailwind initializer, then pin its config and entry stylesheet."""
        self._logger.progress("Setting up Tailwind CSS...")
        run_step(
            command_request(
                f"{shlex.quote(self._settings.npx)} tailwindcss init -p",
                project_path,
                timeout_seconds=self._settings.command_timeout,
            ),
            failure_message="Failed to initialize Tailwind config",
            logger=self._logger,
            runner=self._runner,
        )
        write_file(project_path / "tailwind.config.js", templates.tailwind_config())
        write_file(project_path / "src" / "index.css", templates.index_css())
        self._logger.success("Tailwind CSS setup completed")

    def update_app_component(self, project_path: Path, language: Language) -> Path:
        self._logger.progress("Updating App component...")
        path = write_file(
            app_component_path(project_path, language),
            templates.app_component(language),
        )
        self._logger.success("App component updated")
        return path

    def update_app_css(self, project_path: Path) -> None:
        self._logger.progress("Updating App.css...")
        write_file(project_path / "src" / "App.css", templates.app_css())
        self._logger.success("App.css updated")

    def write_readme(self, project_path: Path, config: ProjectConfig) -> None:
        self._logger.progress("Creating README...")
        write_file(project_path / "README.md", templates.readme(config))
        self._logger.success("README created")
