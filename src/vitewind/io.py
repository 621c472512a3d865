"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys
from typing import Callable, Sequence

import questionary

from .services.errors import UserCancelledError

Validator = Callable[[str], str | None]


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def say(message: str = "") -> None:
    """Print a normal message to stdout.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)


def _read_line(label: str) -> str:
    try:
        return input(label)
    except (KeyboardInterrupt, EOFError) as exc:
        raise UserCancelledError() from exc


def ask_text(text: str, *, default: str = "", validate: Validator | None = None) -> str:
    """Prompt for free text, re-asking until ``validate`` accepts the answer.

    Args:
        text: Prompt label shown to the user.
        default: Value used when the user just presses enter.
        validate: Returns an error message for rejected input, ``None`` otherwise.

    Returns:
        The accepted answer, stripped.

    Raises:
        UserCancelledError: When the user aborts the prompt.
    """
    if _use_questionary():

        def check(value: str) -> bool | str:
            if validate is None:
                return True
            return validate(value) or True

        answer = questionary.text(text, default=default, validate=check).ask()
        if answer is None:
            raise UserCancelledError()
        return str(answer).strip()

    while True:
        suffix = f" [{default}]" if default else ""
        value = _read_line(f"{text}{suffix} ").strip() or default
        problem = validate(value) if validate is not None else None
        if problem is None:
            return value
        print(problem, file=sys.stderr)


def select(text: str, choices: Sequence[tuple[str, str]], default: str) -> str:
    """Prompt for one value among ``(title, value)`` choices.

    Returns:
        The selected value.

    Raises:
        UserCancelledError: When the user aborts the prompt.
    """
    if _use_questionary():
        answer = questionary.select(
            text,
            choices=[questionary.Choice(title, value=value) for title, value in choices],
            default=default,
        ).ask()
        if answer is None:
            raise UserCancelledError()
        return str(answer)

    values = [value for _title, value in choices]
    default_index = values.index(default) + 1 if default in values else 1
    for index, (title, _value) in enumerate(choices, start=1):
        print(f"  {index}) {title}")
    while True:
        raw = _read_line(f"{text} [{default_index}] ").strip()
        if not raw:
            return values[default_index - 1]
        if raw.isdigit() and 1 <= int(raw) <= len(values):
            return values[int(raw) - 1]
        lowered = raw.lower()
        for title, value in choices:
            if lowered in {title.lower(), value.lower()}:
                return value
        print(f"Choose 1-{len(values)}.", file=sys.stderr)
