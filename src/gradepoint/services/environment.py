from __future__ import annotations

import logging
import os
import platform
import shutil
import sys
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

HIGHEST_MINOR_SCANNED = 20


def parse_version(text: Optional[str]) -> Tuple[int, int]:
    """
    "3.12.1" -> (3, 12). Anything that does not start with major.minor gives (-1, -1).
    """
    if not text:
        return (-1, -1)
    parts = text.strip().split(".")
    if len(parts) < 2:
        return (-1, -1)
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        return (-1, -1)


def current_version() -> str:
    return platform.python_version()


def is_compatible(minimum: str, version: Optional[str] = None) -> bool:
    required = parse_version(minimum)
    actual = parse_version(version or current_version())
    if actual == (-1, -1):
        return False
    return actual >= required


def scan_interpreters(minimum: str, search_path: Optional[str] = None) -> List[str]:
    major, minor = parse_version(minimum)
    if major < 0:
        return []

    found: List[str] = []
    for candidate_minor in range(minor, HIGHEST_MINOR_SCANNED + 1):
        name = f"python{major}.{candidate_minor}"
        location = shutil.which(name, path=search_path)
        if location and location not in found:
            found.append(location)
    logger.debug("Interpreters >= %s on PATH: %s", minimum, found)
    return found


def describe_environment(minimum: str) -> List[str]:
    lines = [
        f"Python version: {current_version()}",
        f"Executable:     {sys.executable}",
        f"Platform:       {platform.system()} {platform.release()}",
        f"VIRTUAL_ENV:    {os.getenv('VIRTUAL_ENV', '(not set)')}",
    ]
    if is_compatible(minimum):
        lines.append(f"Current Python version is compatible ({minimum} or later)")
        return lines

    lines.append(f"Current Python version is NOT compatible. This project requires Python {minimum} or later.")
    interpreters = scan_interpreters(minimum)
    if interpreters:
        lines.append(f"Found {len(interpreters)} compatible interpreter(s):")
        lines.extend(f"  {idx}) {path}" for idx, path in enumerate(interpreters, start=1))
        lines.append("Create a virtual environment with one of them and reinstall the project.")
    else:
        lines.append(f"No Python {minimum}+ interpreter found on PATH.")
        lines.append("Download one from https://www.python.org/downloads/")
    return lines
