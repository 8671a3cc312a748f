"""Helpers for working with chart directories and manifest files."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import BinaryIO

from meshkitutils.errors import err_read_file, err_write_file

DOCUMENT_SEPARATOR = b"\n---\n"
CHART_FILES = ("Chart.yaml", "Chart.yml")

_SEMVER = re.compile(
    r"v([0-9]+)\.([0-9]+)\.([0-9]+)"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+[0-9A-Za-z-]+)?\Z"
)


def extract_sem_ver(version_constraint: str) -> str:
    """Return the ``vX.Y.Z`` version that ends a constraint, or "" if none does."""
    match = _SEMVER.search(version_constraint)
    return match.group(0) if match else ""


def is_helm_chart(dir_path: str | os.PathLike[str]) -> bool:
    """Tell whether a directory holds a chart, i.e. a Chart.yaml or Chart.yml."""
    base = Path(dir_path)
    return any((base / name).exists() for name in CHART_FILES)


def write_to_file(stream: BinaryIO, path: str | os.PathLike[str]) -> None:
    """Copy the file at ``path`` to ``stream`` followed by a document separator."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise err_read_file(exc, str(path)) from exc
    try:
        stream.write(data)
        stream.write(DOCUMENT_SEPARATOR)
    except (OSError, ValueError) as exc:
        raise err_write_file(exc, str(path)) from exc