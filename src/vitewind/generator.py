"""Vite project generation and dependency installation."""

from __future__ import annotations

import shlex
from pathlib import Path

from .config import ScaffoldSettings
from .exec import CommandRunner, command_request, run_step
from .log import Logger
from .models import ProjectConfig


class ProjectGenerator:
    """Runs the external generator and package installs for one project."""

    def __init__(
        self,
        settings: ScaffoldSettings,
        logger: Logger,
        runner: CommandRunner | None = None,
    ) -> None:
        self._settings = settings
        self._logger = logger
        self._runner = runner

    def _run(self, command: str, cwd: Path, failure_message: str) -> None:
        run_step(
            command_request(command, cwd, timeout_seconds=self._settings.command_timeout),
            failure_message=failure_message,
            logger=self._logger,
            runner=self._runner,
        )

    def create_project(self, config: ProjectConfig, cwd: Path) -> Path:
        """Scaffold ``<cwd>/<project_name>`` and return its absolute path."""
        self._logger.progress("Creating Vite project...")
        settings = self._settings
        package = shlex.quote(f"vite@{settings.vite_version}")
        self._run(
            f"{shlex.quote(settings.npm)} create {package}"
            f" {config.project_name} -- --template {config.template}",
            cwd,
            "Failed to create Vite project",
        )
        self._logger.success("Vite project created successfully")
        return (cwd / config.project_name).resolve()

    def install_dependencies(self, project_path: Path) -> None:
        """Install the generated project's dependencies, then Tailwind CSS."""
        self._logger.progress("Installing dependencies...")
        npm = shlex.quote(self._settings.npm)
        self._run(f"{npm} install", project_path, "Failed to install base dependencies")
        packages = " ".join(shlex.quote(pkg) for pkg in self._settings.tailwind_packages)
        self._run(
            f"{npm} install -D {packages}",
            project_path,
            "Failed to install Tailwind CSS",
        )
        self._logger.success("Dependencies installed successfully")
