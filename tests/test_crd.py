import json

import pytest

from meshkitutils.crd import (
    GroupVersionResource,
    custom_resources_from_list,
    gvr_for_custom_resource,
    is_crd,
)
from meshkitutils.errors import (
    ERR_MISSING_FIELD_CODE,
    ERR_UNMARSHAL_CODE,
    MeshKitError,
)


def crd_item(group, plural, *versions):
    return {
        "spec": {
            "group": group,
            "names": {"plural": plural},
            "versions": [{"name": v} for v in versions],
        }
    }


def test_gvr_uses_first_version():
    item = crd_item("example.com", "widgets", "v1", "v2")
    assert gvr_for_custom_resource(item) == GroupVersionResource("example.com", "v1", "widgets")


def test_gvr_without_versions_raises():
    with pytest.raises(MeshKitError) as info:
        gvr_for_custom_resource(crd_item("example.com", "widgets"))
    assert info.value.code == ERR_MISSING_FIELD_CODE


def test_custom_resources_from_list_keeps_order():
    items = [crd_item("a.example.com", "alphas", "v1"), crd_item("b.example.com", "betas", "v1beta1")]
    raw = json.dumps({"items": items})
    result = custom_resources_from_list(raw)
    assert result == [gvr_for_custom_resource(item) for item in items]
    assert [r.resource for r in result] == ["alphas", "betas"]


def test_custom_resources_from_list_accepts_bytes_and_empty():
    assert custom_resources_from_list(b'{"items": []}') == []
    assert custom_resources_from_list("{}") == []


def test_custom_resources_from_invalid_json_raises():
    with pytest.raises(MeshKitError) as info:
        custom_resources_from_list("{not json")
    assert info.value.code == ERR_UNMARSHAL_CODE


def test_is_crd():
    assert is_crd({"kind": "CustomResourceDefinition"}) is True
    assert is_crd({"kind": "Service"}) is False
    assert is_crd({}) is False
    assert is_crd({"kind": 5}) is False