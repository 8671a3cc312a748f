"""Read the commit and version recorded in a generated version file."""

from __future__ import annotations

import csv
import io
from pathlib import Path

DEFAULT_VERSION_FILE = "./version"


def read_git_version(path: str | Path = DEFAULT_VERSION_FILE) -> tuple[str, str]:
    """Return ``(version, commit_head)`` from a CSV version file.

    The first record holds the commit, the second the version tag. A missing
    or malformed file yields empty strings.
    """
    version = ""
    commit_head = ""
    try:
        data = Path(path).read_text()
    except OSError:
        return version, commit_head

    try:
        rows = [row for row in csv.reader(io.StringIO(data)) if row]
    except csv.Error:
        return version, commit_head

    if rows and any(len(row) != len(rows[0]) for row in rows):
        return version, commit_head

    for index, row in enumerate(rows[:2]):
        if index == 0:
            commit_head = row[0].strip()
        else:
            version = row[0].strip()
    return version, commit_head