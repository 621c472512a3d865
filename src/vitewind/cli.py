"""Command-line entrypoint for vitewind.

Example:
    $ vitewind demo-app --language typescript
"""

from pathlib import Path
from typing import Annotated

import typer

from . import __version__, io
from . import log as vitewind_log
from .config import load_settings
from .log import ConsoleLogger
from .models import Language
from .services.errors import ServiceFailure
from .workflow import SetupRequest, SetupWorkflow

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

app = typer.Typer(
    add_completion=False,
    help="Scaffold a React + Vite + Tailwind CSS project.",
)


def _version_callback(value: bool) -> None:
    if value:
        io.say(f"vitewind {__version__}")
        raise typer.Exit()


def _log_level_callback(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in vitewind_log.LOG_LEVEL_NAMES:
        raise typer.BadParameter(
            f"expected one of: {', '.join(vitewind_log.LOG_LEVEL_NAMES)}"
        )
    return normalized


@app.command()
def main(
    project_name: Annotated[
        str | None,
        typer.Argument(help="Project directory name; prompted for when omitted."),
    ] = None,
    language: Annotated[
        Language | None,
        typer.Option("--language", "-l", case_sensitive=False, help="Skip the language prompt."),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            callback=_log_level_callback,
            help="trace, debug, info, success, warning or error.",
        ),
    ] = None,
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable colorized output.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=_version_callback, is_eager=True, help="Show the version."
        ),
    ] = False,
) -> None:
    """Create a React app with Vite, then wire in Tailwind CSS."""
    if log_level is not None:
        vitewind_log.set_level(log_level)
    if no_color:
        vitewind_log.set_no_color(True)
    logger = ConsoleLogger()
    try:
        workflow = SetupWorkflow.from_settings(load_settings(), logger)
        report = workflow(
            SetupRequest(cwd=Path.cwd(), project_name=project_name, language=language)
        )
    except ServiceFailure as exc:
        logger.error(str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc
    except KeyboardInterrupt as exc:
        logger.error("Setup interrupted")
        raise typer.Exit(code=EXIT_INTERRUPTED) from exc
    except Exception as exc:
        logger.error("Unexpected error:")
        vitewind_log.error(str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc
    if not report.succeeded:
        raise typer.Exit(code=EXIT_FAILURE)


if __name__ == "__main__":
    app()
