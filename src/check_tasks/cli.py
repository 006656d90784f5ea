from __future__ import annotations

import codecs
import logging
from enum import StrEnum
from pathlib import Path

import click
from pydantic import ValidationError
from pydantic.functional_validators import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings.main import SettingsConfigDict

from check_tasks.logging_utils import logger, set_level
from check_tasks.scanner import Task, scan_file


class Settings(BaseSettings):
    LOG_LEVEL: str = "WARNING"

    ENCODING: str = "utf-8-sig"

    model_config = SettingsConfigDict(env_prefix="CHECK_TASKS_", env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, level: str) -> str:
        level = level.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {level}")
        return level

    @field_validator("ENCODING")
    @classmethod
    def _known_encoding(cls, encoding: str) -> str:
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {encoding}") from e
        return encoding


class ReportMode(StrEnum):
    STANDARD = "standard"
    MINIMAL = "minimal"


class MissingFilenameError(click.UsageError):
    exit_code = 1

    def __init__(self, ctx: click.Context | None = None) -> None:
        super().__init__("Please provide a filename as an argument", ctx)


def minimal_lines(filename: str, tasks: list[Task]) -> list[str]:
    return [f"- {filename}:{task.line}" for task in tasks]


def standard_lines(filename: str, tasks: list[Task]) -> list[str]:
    lines = [f"Error: There are {len(tasks)} uncompleted tasks:"]
    lines.extend(f"- {filename}:{task.line} {task.description}" for task in tasks)
    lines.extend(["", "You MUST complete ALL tasks!"])
    return lines


def report(filename: str, tasks: list[Task], *, mode: ReportMode) -> None:
    """
    Print the outcome of a scan.

    Minimal mode only ever writes `file:line` entries to stdout, one per task.
    Standard mode writes failures to stderr and the confirmation to stdout.
    """
    match mode, bool(tasks):
        case ReportMode.MINIMAL, True:
            for line in minimal_lines(filename, tasks):
                click.echo(line)
        case ReportMode.STANDARD, True:
            for line in standard_lines(filename, tasks):
                click.echo(line, err=True)
        case ReportMode.STANDARD, False:
            click.echo("✓ All tasks completed!")
        case _:
            pass


def _load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e


@click.command(
    "check-tasks",
    help="Fail if FILENAME still contains unchecked `- [ ]` tasks.",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED, metavar="FILENAME")
@click.option("--minimal", is_flag=True, help="Only print `- file:line` for each unchecked task.")
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...], minimal: bool) -> None:
    """
    Check a file for unchecked tasks

    Usage:
        check-tasks TODO.md
        check-tasks TODO.md --minimal   # `- TODO.md:3` per task, for editors

        CHECK_TASKS_LOG_LEVEL=debug check-tasks TODO.md # Enable debug logging
    """
    # Unknown `--flags` land in args; the first non-flag is the file
    filename = next((arg for arg in args if not arg.startswith("--")), None)
    if not filename:
        raise MissingFilenameError(ctx)

    settings = _load_settings()
    set_level(settings.LOG_LEVEL, logger=logger)
    mode = ReportMode.MINIMAL if minimal else ReportMode.STANDARD

    try:
        task_report = scan_file(Path(filename), encoding=settings.ENCODING)
    except FileNotFoundError as e:
        raise click.ClickException(f'File "{filename}" not found') from e
    except OSError as e:
        raise click.ClickException(f'Cannot read file "{filename}": {e.strerror}') from e

    logger.info(f"Scanned {filename} in {mode} mode: {len(task_report.tasks)} unchecked tasks.")
    report(filename, task_report.tasks, mode=mode)

    if not task_report.passed:
        ctx.exit(1)

