from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

TEST_TARGETS = {
    "student": "tests/test_student.py",
    "course": "tests/test_course.py",
    "classifier": "tests/test_grades.py",
}


class ProcessRunnerError(Exception):
    pass


class ExecutableNotFoundError(ProcessRunnerError):
    pass


class ArtifactCopyError(ProcessRunnerError):
    pass


@dataclass(frozen=True)
class CommandResult:
    command: Tuple[str, ...]
    exit_code: int

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def split_command(candidate: str, platform: str = sys.platform) -> Tuple[str, ...]:
    """
    Split a runner command line into arguments.
    On Windows backslashes are kept and surrounding double quotes are removed.
    """
    windows = platform.startswith("win")
    try:
        parts = shlex.split(candidate, posix=not windows)
    except ValueError as exc:
        raise ProcessRunnerError(f"Invalid runner command {candidate!r}: {exc}") from exc
    if windows:
        parts = [p[1:-1] if len(p) >= 2 and p[0] == p[-1] == '"' else p for p in parts]
    if not parts:
        raise ProcessRunnerError(f"Invalid runner command {candidate!r}: empty")
    return tuple(parts)


def build_fallbacks(candidates: Iterable[str], preferred: Optional[str] = None) -> Tuple[str, ...]:
    ordered = [preferred] if preferred else []
    ordered.extend(candidates)

    seen = set()
    result = []
    for candidate in ordered:
        key = candidate.strip().lower()
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(candidate.strip())
    return tuple(result)


def resolve_test_target(name: str) -> str:
    return TEST_TARGETS.get(name.lower(), name)


def run_with_fallbacks(
    candidates: Sequence[str],
    args: Sequence[str] = (),
    cwd: Optional[str] = None,
    echo: Callable[[str], None] = print,
) -> CommandResult:
    """
    Run the first candidate command that can be started.
    A missing executable moves on to the next candidate; any other launch
    failure stops immediately. A non-zero exit code is returned, not raised.
    """
    tried = []
    for candidate in build_fallbacks(candidates):
        command = split_command(candidate) + tuple(args)
        tried.append(command[0])
        logger.info("Running command: %s", " ".join(command))
        try:
            process = subprocess.Popen(
                command,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except FileNotFoundError:
            logger.info("Command not found: %s; trying next fallback", command[0])
            continue
        except OSError as exc:
            raise ProcessRunnerError(f"Failed to run {' '.join(command)}: {exc}") from exc

        with process:
            for line in process.stdout:
                echo(line.rstrip("\n"))
            exit_code = process.wait()
        logger.info("%s exited with code %d", command[0], exit_code)
        return CommandResult(command, exit_code)

    raise ExecutableNotFoundError(
        f"No runnable command found (tried: {', '.join(tried) or 'nothing'})"
    )


def copy_artifacts(source: Path, destination: Path) -> Path:
    source = Path(source)
    destination = Path(destination)
    if not source.is_dir():
        raise ArtifactCopyError(f"Report directory not found at: {source.resolve()}")
    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except (OSError, shutil.Error) as exc:
        raise ArtifactCopyError(f"Failed to copy reports to {destination}: {exc}") from exc
    logger.info("Copied %s to %s", source, destination)
    return destination
