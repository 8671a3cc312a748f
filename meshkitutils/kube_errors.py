"""Errors raised while talking to a cluster and exposing its resources."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from meshkitutils.errors import MeshKitError, Severity

ERR_APPLY_MANIFEST_CODE = "meshkit-11190"
ERR_SERVICE_DISCOVERY_CODE = "meshkit-11191"
ERR_APPLY_HELM_CHART_CODE = "meshkit-11192"
ERR_NEW_KUBE_CLIENT_CODE = "meshkit-11193"
ERR_NEW_DYN_CLIENT_CODE = "meshkit-11194"
ERR_NEW_DISCOVERY_CODE = "meshkit-11195"
ERR_NEW_INFORMER_CODE = "meshkit-11196"
ERR_ENDPOINT_NOT_FOUND_CODE = "meshkit-11197"
ERR_INVALID_API_SERVER_CODE = "meshkit-11198"
ERR_LOAD_CONFIG_CODE = "meshkit-11199"
ERR_VALIDATE_CONFIG_CODE = "meshkit-11200"
ERR_CREATING_HELM_INDEX_CODE = "meshkit-11201"
ERR_ENTRY_WITH_APP_VERSION_NOT_EXISTS_CODE = "meshkit-11202"
ERR_HELM_REPOSITORY_NOT_FOUND_CODE = "meshkit-11203"
ERR_ENTRY_WITH_CHART_VERSION_NOT_EXISTS_CODE = "meshkit-11204"

ERR_EXPOSE_RESOURCE_CODE = "meshkit-11205"
ERR_GETTING_RESOURCE_CODE = "meshkit-11206"
ERR_TRAVERSER_CODE = "meshkit-11207"
ERR_RESOURCE_CANNOT_BE_EXPOSED_CODE = "meshkit-11208"
ERR_SELECTOR_BASED_MAP_CODE = "meshkit-11209"
ERR_PROTOCOL_BASED_MAP_CODE = "meshkit-11210"
ERR_LABEL_BASED_MAP_CODE = "meshkit-11211"
ERR_PORT_PARSING_CODE = "meshkit-11212"
ERR_GENERATE_SERVICE_CODE = "meshkit-11213"
ERR_CONSTRUCTING_REST_HELPER_CODE = "meshkit-11214"
ERR_CREATING_SERVICE_CODE = "meshkit-11215"
ERR_POD_HAS_NO_LABELS_CODE = "meshkit-11216"
ERR_SERVICE_HAS_NO_SELECTORS_CODE = "meshkit-11217"
ERR_INVALID_DEPLOYMENT_NO_SELECTORS_LABELS_CODE = "meshkit-11218"
ERR_INVALID_DEPLOYMENT_NO_SELECTORS_CODE = "meshkit-11219"
ERR_INVALID_REPLICA_NO_SELECTORS_LABELS_CODE = "meshkit-11220"
ERR_INVALID_REPLICA_SET_NO_SELECTORS_CODE = "meshkit-11221"
ERR_NO_PORTS_FOUND_FOR_HEADLESS_RESOURCE_CODE = "meshkit-11222"
ERR_UNKNOWN_SESSION_AFFINITY_CODE = "meshkit-11223"
ERR_MATCH_EXPRESSIONS_CONVERSION_CODE = "meshkit-11224"
ERR_FAILED_TO_EXTRACT_POD_SELECTOR_CODE = "meshkit-11225"
ERR_FAILED_TO_EXTRACT_PORTS_CODE = "meshkit-11226"
ERR_FAILED_TO_EXTRACT_PROTOCOLS_CODE = "meshkit-11227"
ERR_CANNOT_EXPOSE_OBJECT_CODE = "meshkit-11228"

_KUBECONFIG_CAUSE = ["Kubernetes config is not accessible to meshery or not valid"]
_KUBECONFIG_REMEDY = [
    "Upload your kubernetes config via the settings dashboard. "
    "If uploaded, wait for a minute for it to get initialized"
]


def _alert(
    code: str,
    short: Iterable[str],
    long: Iterable[str] = (),
    cause: Iterable[str] = (),
    remedy: Iterable[str] = (),
) -> MeshKitError:
    return MeshKitError(code, Severity.ALERT, short, long, cause, remedy)


def _kind_of(obj: Any) -> str:
    """Return the kind of a manifest mapping or an object with a ``kind``."""
    if isinstance(obj, Mapping):
        return str(obj.get("kind", "") or "")
    return str(getattr(obj, "kind", "") or "")


def _group_kind_text(kind: Any) -> str:
    """Render a group/kind the way ``Kind.group`` is conventionally written."""
    if isinstance(kind, str):
        return kind
    if isinstance(kind, Mapping):
        group, name = kind.get("group", ""), kind.get("kind", "")
    elif hasattr(kind, "kind"):
        group, name = getattr(kind, "group", ""), kind.kind
    else:
        return str(kind)
    return f"{name}.{group}" if group else str(name)


def err_apply_manifest(err) -> MeshKitError:
    return _alert(
        ERR_APPLY_MANIFEST_CODE,
        ["Error Applying manifest"],
        [str(err)],
        ["Manifest could be invalid"],
        ["Make sure manifest yaml is valid"],
    )


def err_service_discovery(err) -> MeshKitError:
    return _alert(
        ERR_SERVICE_DISCOVERY_CODE,
        ["Error Discovering service"],
        [str(err)],
        ["Network not reachable to the service"],
        ["Make sure the endpoint is reachable"],
    )


def err_apply_helm_chart(err) -> MeshKitError:
    return _alert(
        ERR_APPLY_HELM_CHART_CODE,
        ["Error applying helm chart"],
        [str(err)],
        ["Chart could be invalid"],
        ["Make sure to apply valid chart"],
    )


def err_new_kube_client(err) -> MeshKitError:
    return _alert(
        ERR_NEW_KUBE_CLIENT_CODE,
        ["Error creating kubernetes clientset"],
        [str(err)],
        _KUBECONFIG_CAUSE,
        _KUBECONFIG_REMEDY,
    )


def err_new_dyn_client(err) -> MeshKitError:
    return _alert(
        ERR_NEW_DYN_CLIENT_CODE,
        ["Error creating dynamic client"],
        [str(err)],
        _KUBECONFIG_CAUSE,
        _KUBECONFIG_REMEDY,
    )


def err_new_discovery(err) -> MeshKitError:
    return _alert(
        ERR_NEW_DISCOVERY_CODE,
        ["Error creating discovery client"],
        [str(err)],
        ["Discovery resource is invalid or doesnt exist"],
        ["Makes sure the you input valid resource for discovery"],
    )


def err_new_informer(err) -> MeshKitError:
    return _alert(
        ERR_NEW_INFORMER_CODE,
        ["Error creating informer client"],
        [str(err)],
        ["Informer is invalid or doesnt exist"],
        ["Makes sure the you input valid resource for the informer"],
    )


def err_load_config(err) -> MeshKitError:
    return _alert(
        ERR_LOAD_CONFIG_CODE,
        ["Error loading kubernetes config"],
        [str(err)],
        _KUBECONFIG_CAUSE,
        _KUBECONFIG_REMEDY,
    )


def err_validate_config(err) -> MeshKitError:
    return _alert(
        ERR_VALIDATE_CONFIG_CODE,
        ["Validation failed in the kubernetes config"],
        [str(err)],
        _KUBECONFIG_CAUSE,
        _KUBECONFIG_REMEDY,
    )


def err_creating_helm_index(err) -> MeshKitError:
    return _alert(ERR_CREATING_HELM_INDEX_CODE, ["Error while creating Helm Index"], [str(err)])


def err_entry_with_app_version_not_exists(entry: str, app_version: str) -> MeshKitError:
    return _alert(
        ERR_ENTRY_WITH_APP_VERSION_NOT_EXISTS_CODE,
        ["Entry for the app version does not exist"],
        [f"entry {entry} with app version {app_version} does not exists"],
    )


def err_entry_with_chart_version_not_exists(entry: str, app_version: str) -> MeshKitError:
    return _alert(
        ERR_ENTRY_WITH_CHART_VERSION_NOT_EXISTS_CODE,
        ["Entry for the chart version does not exist"],
        [f"entry {entry} with chart version {app_version} does not exists"],
    )


def err_helm_repository_not_found(repo: str, err) -> MeshKitError:
    return _alert(
        ERR_HELM_REPOSITORY_NOT_FOUND_CODE,
        ["Helm repo not found"],
        [f"either the repo {repo} does not exists or is corrupt: {err}"],
    )


def err_endpoint_not_found() -> MeshKitError:
    return _alert(ERR_ENDPOINT_NOT_FOUND_CODE, ["Unable to discover an endpoint"])


def err_invalid_api_server() -> MeshKitError:
    return _alert(ERR_INVALID_API_SERVER_CODE, ["Invalid API Server URL"])


def err_pod_has_no_labels() -> MeshKitError:
    return _alert(ERR_POD_HAS_NO_LABELS_CODE, ["the pod has no labels and cannot be exposed"])


def err_service_has_no_selectors() -> MeshKitError:
    return _alert(ERR_SERVICE_HAS_NO_SELECTORS_CODE, ["the service has no pod selector set"])


def err_invalid_deployment_no_selectors_labels() -> MeshKitError:
    return _alert(
        ERR_INVALID_DEPLOYMENT_NO_SELECTORS_LABELS_CODE,
        ["the deployment has no labels or selectors and cannot be exposed"],
    )


def err_invalid_deployment_no_selectors() -> MeshKitError:
    return _alert(
        ERR_INVALID_DEPLOYMENT_NO_SELECTORS_CODE,
        ["invalid deployment: no selectors, therefore cannot be exposed"],
    )


def err_invalid_replica_no_selectors_labels() -> MeshKitError:
    return _alert(
        ERR_INVALID_REPLICA_NO_SELECTORS_LABELS_CODE,
        ["the replica set has no labels or selectors and cannot be exposed"],
    )


def err_invalid_replica_set_no_selectors() -> MeshKitError:
    return _alert(
        ERR_INVALID_REPLICA_SET_NO_SELECTORS_CODE,
        ["invalid replicaset: no selectors, therefore cannot be exposed"],
    )


def err_no_ports_found_for_headless_resource() -> MeshKitError:
    return _alert(
        ERR_NO_PORTS_FOUND_FOR_HEADLESS_RESOURCE_CODE,
        ["no ports found for the non headless resource"],
    )


def err_unknown_session_affinity(session_affinity) -> MeshKitError:
    text = getattr(session_affinity, "value", session_affinity)
    return _alert(ERR_UNKNOWN_SESSION_AFFINITY_CODE, ["unknown session affinity:", str(text)])


def err_match_expressions_conversion(match_expressions) -> MeshKitError:
    return _alert(
        ERR_MATCH_EXPRESSIONS_CONVERSION_CODE,
        ["couldn't convert expressions - to map-based selector format"],
    )


def err_failed_to_extract_pod_selector(obj) -> MeshKitError:
    return _alert(
        ERR_FAILED_TO_EXTRACT_POD_SELECTOR_CODE,
        ["cannot extract pod selector from ", _kind_of(obj)],
    )


def err_failed_to_extract_ports(obj) -> MeshKitError:
    return _alert(ERR_FAILED_TO_EXTRACT_PORTS_CODE, ["cannot extract ports from ", _kind_of(obj)])


def err_failed_to_extract_protocols(obj) -> MeshKitError:
    return _alert(
        ERR_FAILED_TO_EXTRACT_PROTOCOLS_CODE,
        ["cannot extract protocols from ", _kind_of(obj)],
    )


def err_cannot_expose_object(kind) -> MeshKitError:
    return _alert(ERR_CANNOT_EXPOSE_OBJECT_CODE, ["cannot expose a ", _group_kind_text(kind)])


def err_expose_resource(err) -> MeshKitError:
    return _alert(ERR_EXPOSE_RESOURCE_CODE, [str(err)])


def err_getting_resource(err) -> MeshKitError:
    return _alert(ERR_GETTING_RESOURCE_CODE, [str(err)])


def err_traverser(err) -> MeshKitError:
    return _alert(ERR_TRAVERSER_CODE, [str(err)])


def err_resource_cannot_be_exposed(err, resource_kind: str) -> MeshKitError:
    return _alert(
        ERR_RESOURCE_CANNOT_BE_EXPOSED_CODE,
        ["resource type %s cannot be exposed: ", resource_kind],
        [str(err)],
    )


def err_selector_based_map(err) -> MeshKitError:
    return _alert(ERR_SELECTOR_BASED_MAP_CODE, [str(err)])


def err_protocol_based_map(err) -> MeshKitError:
    return _alert(ERR_PROTOCOL_BASED_MAP_CODE, [str(err)])


def err_label_based_map(err) -> MeshKitError:
    return _alert(ERR_LABEL_BASED_MAP_CODE, [str(err)])


def err_port_parsing(err) -> MeshKitError:
    return _alert(ERR_PORT_PARSING_CODE, [str(err)])


def err_generate_service(err) -> MeshKitError:
    return _alert(ERR_GENERATE_SERVICE_CODE, [str(err)])


def err_constructing_rest_helper(err) -> MeshKitError:
    return _alert(ERR_CONSTRUCTING_REST_HELPER_CODE, [str(err)])


def err_creating_service(err) -> MeshKitError:
    return _alert(ERR_CREATING_SERVICE_CODE, [str(err)])