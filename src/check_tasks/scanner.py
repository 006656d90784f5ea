from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, PositiveInt

from check_tasks.logging_utils import logger

# Checked boxes (`[x]`, `[X]`, ...) never match: the brackets may only hold whitespace.
# A stray `\r` or Unicode line separator inside the text also rules the line out.
UNCHECKED_TASK_PATTERN = re.compile(r"^-\s+\[\s*\]\s+([^\r\u2028\u2029]+)$")


class Task(BaseModel):
    """An unchecked checkbox item found in a file"""

    model_config = ConfigDict(frozen=True)

    description: str
    line: PositiveInt


class TaskReport(BaseModel):
    """Unchecked tasks of one file, in file order"""

    path: Path
    tasks: list[Task] = []

    @property
    def passed(self) -> bool:
        return not self.tasks


def find_uncompleted_tasks(content: str) -> list[Task]:
    """
    Collect every unchecked task in `content`.

    Lines are split on `\\n` only and trimmed before matching, so `\\r\\n`
    endings and indentation do not get in the way. A bare `- [ ]` with no
    text after it is not a task.
    """
    tasks: list[Task] = []
    for index, line in enumerate(content.split("\n")):
        match = UNCHECKED_TASK_PATTERN.match(line.strip())
        if match:
            task = Task(description=match.group(1).strip(), line=index + 1)
            logger.debug(f"Unchecked task at line {task.line}: {task.description}")
            tasks.append(task)
    return tasks


def read_task_file(path: Path, *, encoding: str = "utf-8-sig") -> str:
    if not path.is_file():
        raise FileNotFoundError(f'File "{path}" not found')

    # newline="" keeps `\r` so line numbers follow `\n` boundaries only
    with path.open(encoding=encoding, errors="replace", newline="") as f:
        content = f.read()

    logger.debug(f"Read {len(content)} characters from {path}.")
    return content


def scan_file(path: Path, *, encoding: str = "utf-8-sig") -> TaskReport:
    """Read `path` and report its unchecked tasks"""
    report = TaskReport(path=path, tasks=find_uncompleted_tasks(read_task_file(path, encoding=encoding)))
    logger.debug(f"Found {len(report.tasks)} unchecked tasks in {path}.")
    return report
