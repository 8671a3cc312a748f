import json

import pytest
import yaml

from meshkitutils.errors import (
    ERR_DECODE_YAML_CODE,
    ERR_EXPECTED_TYPE_MISMATCH_CODE,
    ERR_INCOMPATIBLE_VERSION_CODE,
    ERR_NO_VERSION_CODE,
    ERR_UNMARSHAL_CODE,
    ERR_VALIDATE_DOCKER_COMPOSE_FILE_CODE,
    MeshKitError,
)
from meshkitutils.kompose import (
    format_compose_file,
    format_converted_manifest,
    validate_compose_file,
    version_check,
)

SCHEMA = json.dumps(
    {
        "type": "object",
        "required": ["services"],
        "properties": {
            "version": {"type": "string"},
            "services": {"type": "object"},
        },
    }
)

VALID_COMPOSE = 'version: "3.3"\nservices:\n  web:\n    image: nginx\n'


def test_validate_accepts_valid_compose():
    assert validate_compose_file(VALID_COMPOSE, SCHEMA) is None


def test_validate_rejects_missing_services():
    with pytest.raises(MeshKitError) as info:
        validate_compose_file('version: "3.3"\n', SCHEMA)
    assert info.value.code == ERR_VALIDATE_DOCKER_COMPOSE_FILE_CODE


def test_validate_rejects_bad_schema_json():
    with pytest.raises(MeshKitError) as info:
        validate_compose_file(VALID_COMPOSE, "{not json")
    assert info.value.code == ERR_VALIDATE_DOCKER_COMPOSE_FILE_CODE


@pytest.mark.parametrize("compose", [VALID_COMPOSE, "version: 3.3\n", 'version: "2"\n'])
def test_version_check_accepts_compatible(compose):
    assert version_check(compose) is None


@pytest.mark.parametrize(
    "compose, code",
    [
        ('version: "3.4"\n', ERR_INCOMPATIBLE_VERSION_CODE),
        ("services: {}\n", ERR_NO_VERSION_CODE),
        ("version: abc\n", ERR_EXPECTED_TYPE_MISMATCH_CODE),
        ("version: [1, 2]\n", ERR_UNMARSHAL_CODE),
        ("version: [unclosed\n", ERR_UNMARSHAL_CODE),
    ],
)
def test_version_check_errors(compose, code):
    with pytest.raises(MeshKitError) as info:
        version_check(compose)
    assert info.value.code == code


@pytest.mark.parametrize("compose", [VALID_COMPOSE, "version: 3.3\nservices: {}\n"])
def test_format_compose_file_keeps_only_version_as_string(compose):
    assert yaml.safe_load(format_compose_file(compose)) == {"version": "3.3"}


def test_format_compose_file_without_version_is_empty_mapping():
    assert yaml.safe_load(format_compose_file("services: {}\n")) == {}


def test_format_compose_file_keeps_bytes_and_bad_input():
    result = format_compose_file(VALID_COMPOSE.encode())
    assert isinstance(result, bytes)
    assert yaml.safe_load(result) == {"version": "3.3"}
    broken = "version: [unclosed\n"
    assert format_compose_file(broken) == broken


def test_format_converted_manifest_splits_list_items():
    items = [
        {"apiVersion": "v1", "kind": "Service", "metadata": {"name": "web"}},
        {"apiVersion": "apps/v1", "kind": "Deployment", "metadata": {"name": "web"}},
    ]
    manifest = yaml.safe_dump({"apiVersion": "v1", "kind": "List", "items": items})
    parts = format_converted_manifest(manifest).split("\n---\n")
    assert [yaml.safe_load(part) for part in parts] == items


def test_format_converted_manifest_non_list_is_empty():
    assert format_converted_manifest("kind: Service\n") == ""


def test_format_converted_manifest_invalid_yaml_raises():
    with pytest.raises(MeshKitError) as info:
        format_converted_manifest("kind: [unclosed\n")
    assert info.value.code == ERR_DECODE_YAML_CODE