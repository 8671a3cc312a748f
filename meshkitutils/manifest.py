"""Split multi-document manifests and decode single resource objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml

from meshkitutils.kube_errors import err_apply_manifest

SEPARATOR = "\n---\n"


@dataclass
class ApplyOptions:
    """How a manifest should be applied to a cluster.

    An empty namespace means the namespace written in each manifest is used.
    """

    namespace: str = ""
    update: bool = False
    delete: bool = False
    ignore_errors: bool = False


def split_manifests(contents: str | bytes) -> list[str]:
    """Split manifest text on document separators, dropping a lone trailing newline."""
    text = contents.decode() if isinstance(contents, bytes) else contents
    manifests = text.split(SEPARATOR)
    if manifests and manifests[-1] == "\n":
        manifests.pop()
    return manifests


def object_from_manifest(manifest: str | bytes) -> dict[str, Any]:
    """Decode one manifest into a resource mapping; it must name its kind."""
    try:
        document = next(iter(yaml.safe_load_all(manifest)), None)
    except yaml.YAMLError as exc:
        raise err_apply_manifest(exc) from exc
    if not isinstance(document, dict):
        raise err_apply_manifest(ValueError("manifest does not describe an object"))
    kind = document.get("kind")
    if not isinstance(kind, str) or not kind:
        raise err_apply_manifest(ValueError("Object 'Kind' is missing in manifest"))
    return document