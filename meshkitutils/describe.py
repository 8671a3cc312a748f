"""Resource kinds that can be described, with their API groups."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from meshkitutils.errors import err_get_describer_func

_CORE = ""
_APPS = "apps"
_BATCH = "batch"
_CERTIFICATES = "certificates.k8s.io"
_DISCOVERY = "discovery.k8s.io"
_NETWORKING = "networking.k8s.io"
_RBAC = "rbac.authorization.k8s.io"


class DescribeType(enum.IntEnum):
    """The kind of resource to describe."""

    SERVICE = 0
    POD = enum.auto()
    NAMESPACE = enum.auto()
    JOB = enum.auto()
    CRON_JOB = enum.auto()
    DEPLOYMENT = enum.auto()
    DAEMON_SET = enum.auto()
    REPLICA_SET = enum.auto()
    STATEFUL_SET = enum.auto()
    SECRET = enum.auto()
    SERVICE_ACCOUNT = enum.auto()
    NODE = enum.auto()
    LIMIT_RANGE = enum.auto()
    RESOURCE_QUOTA = enum.auto()
    PERSISTENT_VOLUME = enum.auto()
    PERSISTENT_VOLUME_CLAIM = enum.auto()
    ENDPOINTS = enum.auto()
    CONFIG_MAP = enum.auto()
    PRIORITY_CLASS = enum.auto()
    INGRESS = enum.auto()
    ROLE = enum.auto()
    CLUSTER_ROLE = enum.auto()
    ROLE_BINDING = enum.auto()
    CLUSTER_ROLE_BINDING = enum.auto()
    NETWORK_POLICY = enum.auto()
    REPLICATION_CONTROLLER = enum.auto()
    CERTIFICATE_SIGNING_REQUEST = enum.auto()
    ENDPOINT_SLICE = enum.auto()


@dataclass(frozen=True)
class GroupKind:
    """An API group together with a kind."""

    group: str
    kind: str

    def __str__(self) -> str:
        return f"{self.kind}.{self.group}" if self.group else self.kind


RESOURCE_MAP: dict[DescribeType, GroupKind] = {
    DescribeType.POD: GroupKind(_CORE, "Pod"),
    DescribeType.DEPLOYMENT: GroupKind(_APPS, "Deployment"),
    DescribeType.JOB: GroupKind(_BATCH, "Job"),
    DescribeType.CRON_JOB: GroupKind(_BATCH, "CronJob"),
    DescribeType.STATEFUL_SET: GroupKind(_APPS, "StatefulSet"),
    DescribeType.DAEMON_SET: GroupKind(_APPS, "DaemonSet"),
    DescribeType.REPLICA_SET: GroupKind(_APPS, "ReplicaSet"),
    DescribeType.SECRET: GroupKind(_CORE, "Secret"),
    DescribeType.SERVICE: GroupKind(_CORE, "Service"),
    DescribeType.SERVICE_ACCOUNT: GroupKind(_CORE, "ServiceAccount"),
    DescribeType.NODE: GroupKind(_CORE, "Node"),
    DescribeType.LIMIT_RANGE: GroupKind(_CORE, "LimitRange"),
    DescribeType.RESOURCE_QUOTA: GroupKind(_CORE, "ResourceQuota"),
    DescribeType.PERSISTENT_VOLUME: GroupKind(_CORE, "PersistentVolume"),
    DescribeType.PERSISTENT_VOLUME_CLAIM: GroupKind(_CORE, "PersistentVolumeClaim"),
    DescribeType.NAMESPACE: GroupKind(_CORE, "Namespace"),
    DescribeType.ENDPOINTS: GroupKind(_CORE, "Endpoints"),
    DescribeType.CONFIG_MAP: GroupKind(_CORE, "ConfigMap"),
    DescribeType.PRIORITY_CLASS: GroupKind(_CORE, "PriorityClass"),
    DescribeType.INGRESS: GroupKind(_NETWORKING, "Ingress"),
    DescribeType.ROLE: GroupKind(_RBAC, "Role"),
    DescribeType.CLUSTER_ROLE: GroupKind(_RBAC, "ClusterRole"),
    DescribeType.ROLE_BINDING: GroupKind(_RBAC, "RoleBinding"),
    DescribeType.CLUSTER_ROLE_BINDING: GroupKind(_RBAC, "ClusterRoleBinding"),
    DescribeType.NETWORK_POLICY: GroupKind(_NETWORKING, "NetworkPolicy"),
    DescribeType.REPLICATION_CONTROLLER: GroupKind(_CORE, "ReplicationController"),
    DescribeType.CERTIFICATE_SIGNING_REQUEST: GroupKind(
        _CERTIFICATES, "CertificateSigningRequest"
    ),
    DescribeType.ENDPOINT_SLICE: GroupKind(_DISCOVERY, "EndpointSlice"),
}


def resource_kind(describe_type: DescribeType | int) -> GroupKind:
    """Return the group and kind for a describe type; raise if it is unknown."""
    try:
        return RESOURCE_MAP[DescribeType(describe_type)]
    except (ValueError, KeyError):
        raise err_get_describer_func() from None