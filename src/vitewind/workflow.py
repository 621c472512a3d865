"""Linear, fail-fast setup workflow.

The workflow walks a fixed sequence of states. The first ``ServiceFailure``
moves it to ``FAILED`` and no later step runs; nothing already done on disk
is undone. The workflow never exits the process: callers inspect the
returned ``SetupReport``.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict

from . import io, prompting
from .config import REQUIRED_EXECUTABLES, ScaffoldSettings
from .exec import CommandRunner
from .generator import ProjectGenerator
from .log import Logger
from .materialize import FileMaterializer
from .models import Language, ProjectConfig
from .prerequisites import Which, check_prerequisites
from .services.base import BaseService
from .services.errors import ServiceFailure

CollectConfig = Callable[..., ProjectConfig]

DEV_SERVER_URL = "http://localhost:5173"


class SetupState(str, Enum):
    START = "start"
    PREREQUISITES_CHECKED = "prerequisites-checked"
    CONFIG_COLLECTED = "config-collected"
    PROJECT_GENERATED = "project-generated"
    DEPENDENCIES_INSTALLED = "dependencies-installed"
    CSS_TOOL_CONFIGURED = "css-tool-configured"
    APP_UPDATED = "app-updated"
    STYLES_UPDATED = "styles-updated"
    README_WRITTEN = "readme-written"
    DONE = "done"
    FAILED = "failed"


STATE_ORDER: tuple[SetupState, ...] = tuple(
    state for state in SetupState if state is not SetupState.FAILED
)


class SetupRequest(BaseModel):
    cwd: Path
    project_name: str | None = None
    language: Language | None = None
    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class SetupReport:
    """Outcome of one workflow run.

    Attributes:
        state: ``DONE`` or ``FAILED``.
        reached: Last state completed before the run ended.
        config: Collected configuration, once known.
        project_path: Absolute path of the generated project, once created.
        failure: The failure that stopped the run, if any.
    """

    state: SetupState
    reached: SetupState
    config: ProjectConfig | None = None
    project_path: Path | None = None
    failure: ServiceFailure | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is SetupState.DONE


class SetupWorkflow(BaseService[SetupRequest, SetupReport]):
    def __init__(
        self,
        *,
        logger: Logger,
        generator: ProjectGenerator,
        materializer: FileMaterializer,
        collect_config: CollectConfig = prompting.collect_project_config,
        which: Which = shutil.which,
        say: Callable[[str], None] = io.say,
    ) -> None:
        self._logger = logger
        self._generator = generator
        self._materializer = materializer
        self._collect_config = collect_config
        self._which = which
        self._say = say
        self._state = SetupState.START
        self._config: ProjectConfig | None = None
        self._project_path: Path | None = None

    @classmethod
    def from_settings(
        cls,
        settings: ScaffoldSettings,
        logger: Logger,
        *,
        runner: CommandRunner | None = None,
        collect_config: CollectConfig = prompting.collect_project_config,
        which: Which = shutil.which,
        say: Callable[[str], None] = io.say,
    ) -> SetupWorkflow:
        """Wire the workflow with default generator and materializer."""
        return cls(
            logger=logger,
            generator=ProjectGenerator(settings, logger, runner),
            materializer=FileMaterializer(settings, logger, runner),
            collect_config=collect_config,
            which=which,
            say=say,
        )

    @property
    def state(self) -> SetupState:
        return self._state

    def _advance(self, state: SetupState) -> None:
        self._logger.debug(f"state: {self._state.value} -> {state.value}")
        self._state = state

    def _report(self, state: SetupState, failure: ServiceFailure | None = None) -> SetupReport:
        return SetupReport(
            state=state,
            reached=self._state,
            config=self._config,
            project_path=self._project_path,
            failure=failure,
        )

    def _run(self, request: SetupRequest) -> SetupReport:
        self._state = SetupState.START
        self._config = None
        self._project_path = None

        check_prerequisites(self._logger, executables=REQUIRED_EXECUTABLES, which=self._which)
        self._advance(SetupState.PREREQUISITES_CHECKED)

        config = self._collect_config(
            request.cwd,
            project_name=request.project_name,
            language=request.language,
        )
        self._config = config
        self._advance(SetupState.CONFIG_COLLECTED)

        self._say("")
        self._logger.info("Starting project setup...")
        project_path = self._generator.create_project(config, request.cwd)
        self._project_path = project_path
        self._advance(SetupState.PROJECT_GENERATED)

        self._generator.install_dependencies(project_path)
        self._advance(SetupState.DEPENDENCIES_INSTALLED)

        self._materializer.setup_tailwind(project_path)
        self._advance(SetupState.CSS_TOOL_CONFIGURED)

        self._materializer.update_app_component(project_path, config.language)
        self._advance(SetupState.APP_UPDATED)

        self._materializer.update_app_css(project_path)
        self._advance(SetupState.STYLES_UPDATED)

        self._materializer.write_readme(project_path, config)
        self._advance(SetupState.README_WRITTEN)

        self._advance(SetupState.DONE)
        self._print_next_steps(config)
        return self._report(SetupState.DONE)

    def _handle_failure(self, error: ServiceFailure) -> SetupReport:
        self._logger.error(str(error))
        if error.recovery_hint:
            self._logger.warning(error.recovery_hint)
        return self._report(SetupState.FAILED, failure=error)

    def _print_next_steps(self, config: ProjectConfig) -> None:
        self._say(prompting.banner("🎉 Setup Complete!").rstrip("\n"))
        self._say("\nNext steps:")
        self._say(f"  1. cd {config.project_name}")
        self._say("  2. npm run dev")
        self._say(f"  3. Open {DEV_SERVER_URL}\n")
        self._logger.success("Your React + Vite + Tailwind project is ready!")
        self._logger.info(
            "Both standard classes (m-10, text-2xl) and arbitrary values"
            " (m-[100px], text-[10px]) will work perfectly!"
        )
