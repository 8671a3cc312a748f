"""Read custom resource definitions into group/version/resource triples."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from meshkitutils.errors import err_missing_field, err_unmarshal


@dataclass(frozen=True)
class GroupVersionResource:
    """Identifies a resource type served by the cluster."""

    group: str
    version: str
    resource: str


def gvr_for_custom_resource(crd: Mapping[str, Any]) -> GroupVersionResource:
    """Build the resource triple of a CRD item, using its first version."""
    spec = crd.get("spec") or {}
    versions = spec.get("versions") or []
    if not versions:
        raise err_missing_field(
            ValueError("custom resource definition declares no versions"), "spec.versions"
        )
    return GroupVersionResource(
        group=spec.get("group", "") or "",
        version=versions[0].get("name", "") or "",
        resource=(spec.get("names") or {}).get("plural", "") or "",
    )


def custom_resources_from_list(raw: str | bytes) -> list[GroupVersionResource]:
    """Parse a JSON list of CRDs and return one triple per item."""
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as exc:
        raise err_unmarshal(exc) from exc
    if data is None:
        return []
    if not isinstance(data, Mapping):
        raise err_unmarshal(TypeError("expected a JSON object holding an items list"))
    return [gvr_for_custom_resource(item) for item in data.get("items") or []]


def is_crd(manifest: Mapping[str, Any]) -> bool:
    """Tell whether a manifest is a CustomResourceDefinition."""
    return manifest.get("kind") == "CustomResourceDefinition"