"""Validate and normalise docker-compose files and converted manifests."""

from __future__ import annotations

import json
from typing import Any

import yaml
from jsonschema.exceptions import SchemaError, best_match
from jsonschema.validators import validator_for

from meshkitutils.errors import (
    err_decode_yaml,
    err_expected_type_mismatch,
    err_incompatible_version,
    err_no_version,
    err_type_cast,
    err_unmarshal,
    err_validate_docker_compose_file,
)

LIST_KIND = "List"
MAX_COMPATIBLE_VERSION = 3.3
_NULL_TAG = "tag:yaml.org,2002:null"


def validate_compose_file(compose: str | bytes, schema: str | bytes) -> None:
    """Check a compose file against a JSON schema; raise if it does not match."""
    try:
        schema_doc = json.loads(schema)
    except (ValueError, UnicodeDecodeError) as exc:
        raise err_validate_docker_compose_file(exc) from exc
    validator_cls = validator_for(schema_doc)
    try:
        validator_cls.check_schema(schema_doc)
    except SchemaError as exc:
        raise err_validate_docker_compose_file(exc.message) from exc
    try:
        document = yaml.safe_load(compose)
    except yaml.YAMLError as exc:
        raise err_validate_docker_compose_file(exc) from exc
    error = best_match(validator_cls(schema_doc).iter_errors(document))
    if error is not None:
        raise err_validate_docker_compose_file(error.message)


def _compose_version(compose: str | bytes) -> str:
    """Return the ``version`` scalar exactly as written, or "" if absent."""
    try:
        node = yaml.compose(compose, Loader=yaml.SafeLoader)
    except yaml.YAMLError as exc:
        raise err_unmarshal(exc) from exc
    if node is None:
        return ""
    if not isinstance(node, yaml.MappingNode):
        raise err_unmarshal(ValueError("compose file is not a mapping"))
    for key, value in node.value:
        if isinstance(key, yaml.ScalarNode) and key.value == "version":
            if not isinstance(value, yaml.ScalarNode):
                raise err_unmarshal(ValueError("version must be a scalar"))
            return "" if value.tag == _NULL_TAG else value.value
    return ""


def _parse_float(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise ValueError(f"invalid float: {text!r}")
    return float(text)


def version_check(compose: str | bytes) -> None:
    """Raise unless the compose file declares a version no newer than 3.3."""
    version = _compose_version(compose)
    if not version:
        raise err_no_version()
    try:
        value = _parse_float(version)
    except ValueError as exc:
        raise err_expected_type_mismatch(exc, "float") from exc
    if value > MAX_COMPATIBLE_VERSION:
        raise err_incompatible_version()


def format_compose_file(compose: str | bytes) -> str | bytes:
    """Reduce a compose file to its version, written as a string.

    An unreadable file is returned unchanged.
    """
    try:
        version = _compose_version(compose)
    except Exception:
        return compose
    text = yaml.safe_dump({"version": version} if version else {})
    return text.encode() if isinstance(compose, bytes) else text


def format_converted_manifest(manifest: str) -> str:
    """Split a ``List`` manifest into its items joined by document separators."""
    try:
        document: Any = yaml.safe_load(manifest)
    except yaml.YAMLError as exc:
        raise err_decode_yaml(exc) from exc
    if document is None:
        return ""
    if not isinstance(document, dict):
        raise err_decode_yaml(ValueError("manifest is not a mapping"))
    if document.get("kind") != LIST_KIND:
        return ""
    items = document.get("items")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise err_type_cast(TypeError("items of a List must be a sequence"))
    return "\n---\n".join(yaml.safe_dump(item, default_flow_style=False) for item in items)