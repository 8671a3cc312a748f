"""Build Service manifests that expose pods, controllers and services."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from meshkitutils.kube_errors import (
    err_cannot_expose_object,
    err_failed_to_extract_pod_selector,
    err_failed_to_extract_ports,
    err_failed_to_extract_protocols,
    err_invalid_deployment_no_selectors,
    err_invalid_deployment_no_selectors_labels,
    err_invalid_replica_no_selectors_labels,
    err_invalid_replica_set_no_selectors,
    err_match_expressions_conversion,
    err_pod_has_no_labels,
    err_service_has_no_selectors,
    err_unknown_session_affinity,
)

DEFAULT_PROTOCOL = "TCP"
CLUSTER_IP_NONE = "None"
_INTEGER = re.compile(r"[+-]?[0-9]+")


class SessionAffinity(str, enum.Enum):
    """Session affinity of a Service."""

    NONE = "None"
    CLIENT_IP = "ClientIP"


class ServiceType(str, enum.Enum):
    """Supported Service types."""

    CLUSTER_IP = "ClusterIP"
    NODE_PORT = "NodePort"
    LOAD_BALANCER = "LoadBalancer"


@dataclass
class ExposeConfig:
    """How the generated Service should look.

    An empty ``type`` leaves the cluster default (ClusterIP) in place.
    """

    type: ServiceType | str = ""
    load_balancer_ip: str = ""
    cluster_ip: str = ""
    namespace: str = ""
    session_affinity: SessionAffinity | str = ""
    name: str = ""
    annotations: dict[str, str] = field(default_factory=dict)


class _Shape(enum.Enum):
    REPLICATION_CONTROLLER = enum.auto()
    POD = enum.auto()
    SERVICE = enum.auto()
    EXTENSIONS_DEPLOYMENT = enum.auto()
    APPS_DEPLOYMENT = enum.auto()
    EXTENSIONS_REPLICA_SET = enum.auto()
    APPS_REPLICA_SET = enum.auto()


_SHAPES = {
    ("v1", "ReplicationController"): _Shape.REPLICATION_CONTROLLER,
    ("v1", "Pod"): _Shape.POD,
    ("v1", "Service"): _Shape.SERVICE,
    ("extensions/v1beta1", "Deployment"): _Shape.EXTENSIONS_DEPLOYMENT,
    ("apps/v1", "Deployment"): _Shape.APPS_DEPLOYMENT,
    ("apps/v1beta2", "Deployment"): _Shape.APPS_DEPLOYMENT,
    ("apps/v1beta1", "Deployment"): _Shape.APPS_DEPLOYMENT,
    ("extensions/v1beta1", "ReplicaSet"): _Shape.EXTENSIONS_REPLICA_SET,
    ("apps/v1", "ReplicaSet"): _Shape.APPS_REPLICA_SET,
    ("apps/v1beta2", "ReplicaSet"): _Shape.APPS_REPLICA_SET,
}

_EXPOSABLE = {
    ("", "ReplicationController"),
    ("", "Service"),
    ("", "Pod"),
    ("apps", "Deployment"),
    ("apps", "ReplicaSet"),
    ("extensions", "Deployment"),
    ("extensions", "ReplicaSet"),
}


def _text(value: Any) -> str:
    return str(getattr(value, "value", value) or "")


def _shape(obj: Mapping[str, Any]) -> _Shape | None:
    return _SHAPES.get((obj.get("apiVersion", ""), obj.get("kind", "")))


def _spec(obj: Mapping[str, Any]) -> Mapping[str, Any]:
    return obj.get("spec") or {}


def _pod_spec(obj: Mapping[str, Any], shape: _Shape) -> Mapping[str, Any]:
    if shape is _Shape.POD:
        return _spec(obj)
    return ((_spec(obj).get("template") or {}).get("spec")) or {}


def _container_ports(pod_spec: Mapping[str, Any]):
    for container in pod_spec.get("containers") or ():
        yield from container.get("ports") or ()


def can_be_exposed(group: str, kind: str) -> None:
    """Raise unless resources of this group and kind can be exposed."""
    if (group, kind) not in _EXPOSABLE:
        raise err_cannot_expose_object({"group": group, "kind": kind})


def _strict_selector(obj: Mapping[str, Any], missing_error) -> dict[str, str]:
    selector = _spec(obj).get("selector")
    if selector is None or not selector.get("matchLabels"):
        raise missing_error()
    expressions = selector.get("matchExpressions") or []
    if expressions:
        raise err_match_expressions_conversion(expressions)
    return dict(selector["matchLabels"])


def _lenient_selector(obj: Mapping[str, Any], missing_error) -> dict[str, str]:
    spec = _spec(obj)
    selector = spec.get("selector")
    if selector is not None:
        expressions = selector.get("matchExpressions") or []
        if expressions:
            raise err_match_expressions_conversion(expressions)
        labels = selector.get("matchLabels") or {}
    else:
        labels = ((spec.get("template") or {}).get("metadata") or {}).get("labels") or {}
    if not labels:
        raise missing_error()
    return dict(labels)


def map_based_selector(obj: Mapping[str, Any]) -> dict[str, str]:
    """Return the map-based pod selector of a manifest.

    Set-based selectors (match expressions) cannot be converted and raise.
    """
    shape = _shape(obj)
    if shape is _Shape.REPLICATION_CONTROLLER:
        return dict(_spec(obj).get("selector") or {})
    if shape is _Shape.POD:
        labels = (obj.get("metadata") or {}).get("labels") or {}
        if not labels:
            raise err_pod_has_no_labels()
        return dict(labels)
    if shape is _Shape.SERVICE:
        selector = _spec(obj).get("selector")
        if selector is None:
            raise err_service_has_no_selectors()
        return dict(selector)
    if shape is _Shape.EXTENSIONS_DEPLOYMENT:
        return _lenient_selector(obj, err_invalid_deployment_no_selectors_labels)
    if shape is _Shape.APPS_DEPLOYMENT:
        return _strict_selector(obj, err_invalid_deployment_no_selectors)
    if shape is _Shape.EXTENSIONS_REPLICA_SET:
        return _lenient_selector(obj, err_invalid_replica_no_selectors_labels)
    if shape is _Shape.APPS_REPLICA_SET:
        return _strict_selector(obj, err_invalid_replica_set_no_selectors)
    raise err_failed_to_extract_pod_selector(obj)


def protocols_for_object(obj: Mapping[str, Any]) -> dict[str, str]:
    """Map each exposed port number (as text) to its protocol, TCP by default."""
    shape = _shape(obj)
    if shape is None:
        raise err_failed_to_extract_protocols(obj)
    if shape is _Shape.SERVICE:
        ports = _spec(obj).get("ports") or ()
        return {
            str(int(p.get("port", 0) or 0)): p.get("protocol") or DEFAULT_PROTOCOL
            for p in ports
        }
    return {
        str(int(p.get("containerPort", 0) or 0)): p.get("protocol") or DEFAULT_PROTOCOL
        for p in _container_ports(_pod_spec(obj, shape))
    }


def ports_for_object(obj: Mapping[str, Any]) -> list[str]:
    """List the port numbers (as text) a manifest exposes, in declaration order."""
    shape = _shape(obj)
    if shape is None:
        raise err_failed_to_extract_ports(obj)
    if shape is _Shape.SERVICE:
        return [str(int(p.get("port", 0) or 0)) for p in _spec(obj).get("ports") or ()]
    return [
        str(int(p.get("containerPort", 0) or 0))
        for p in _container_ports(_pod_spec(obj, shape))
    ]


def _parse_port(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid port number: {text!r}")
    return int(text)


def generate_service(
    config: ExposeConfig,
    selectors: Mapping[str, str],
    labels: Mapping[str, str],
    protocols: Mapping[str, str],
    ports: Sequence[str],
) -> dict[str, Any]:
    """Build a Service manifest mapping for the given ports and selectors."""
    service_ports = []
    for number, port in enumerate(ports, start=1):
        value = _parse_port(port)
        entry: dict[str, Any] = {
            "port": value,
            "protocol": protocols.get(port, DEFAULT_PROTOCOL),
            "targetPort": value,
        }
        if len(ports) > 1:
            entry["name"] = f"port-{number}"
        service_ports.append(entry)

    metadata: dict[str, Any] = {}
    if config.name:
        metadata["name"] = config.name
    if labels:
        metadata["labels"] = dict(labels)
    if config.namespace:
        metadata["namespace"] = config.namespace
    if config.annotations:
        metadata["annotations"] = dict(config.annotations)

    spec: dict[str, Any] = {"ports": service_ports}
    if selectors:
        spec["selector"] = dict(selectors)

    service_type = _text(config.type)
    if service_type:
        spec["type"] = service_type
    if service_type == ServiceType.LOAD_BALANCER.value and config.load_balancer_ip:
        spec["loadBalancerIP"] = config.load_balancer_ip

    affinity = _text(config.session_affinity)
    if affinity:
        try:
            spec["sessionAffinity"] = SessionAffinity(affinity).value
        except ValueError:
            raise err_unknown_session_affinity(config.session_affinity) from None

    if config.cluster_ip:
        spec["clusterIP"] = (
            CLUSTER_IP_NONE if config.cluster_ip == CLUSTER_IP_NONE else config.cluster_ip
        )

    return {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": metadata,
        "spec": spec,
    }