"""Discover the internal and external endpoints of a cluster service."""

from __future__ import annotations

import socket
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import urlsplit

from meshkitutils.kube_errors import (
    err_endpoint_not_found,
    err_invalid_api_server,
    err_service_discovery,
)

DIAL_TIMEOUT = 2.0


@dataclass
class HostPort:
    """A network address and port."""

    address: str = ""
    port: int = 0

    def __str__(self) -> str:
        return f"{self.address}:{self.port}"


@dataclass
class Endpoint:
    """Where a service can be reached from inside and outside the cluster."""

    internal: HostPort | None = None
    external: HostPort | None = None


@dataclass
class MockOptions:
    """Replace reachability probes by comparison with one desired endpoint."""

    desired_endpoint: str = ""


@dataclass
class ServiceOptions:
    """Which service, and which of its ports, to discover."""

    name: str = ""
    namespace: str = ""
    port_selector: str = ""
    api_server_url: str = ""
    worker_node_ip: str = ""
    mock: MockOptions | None = None


class ServiceClient(Protocol):
    def get_service(self, namespace: str, name: str) -> Mapping[str, Any]: ...


def tcp_check(host_port: HostPort, mock: MockOptions | None = None) -> bool:
    """Tell whether a TCP connection to ``host_port`` can be opened."""
    if mock is not None:
        return str(host_port) == mock.desired_endpoint
    try:
        with socket.create_connection(
            (host_port.address, host_port.port), timeout=DIAL_TIMEOUT
        ):
            return True
    except (OSError, OverflowError, ValueError):
        return False


def _split_host(hostport: str) -> str:
    """Return the host part of ``host:port``; the port must be present."""
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0 or hostport[end + 1 : end + 2] != ":":
            raise err_invalid_api_server()
        return hostport[1:end]
    host, sep, _ = hostport.rpartition(":")
    if not sep or ":" in host or "[" in host or "]" in host:
        raise err_invalid_api_server()
    return host


def _api_server_host(url: str) -> str:
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        raise err_invalid_api_server() from None
    return _split_host(netloc.rpartition("@")[2])


def get_endpoint(opts: ServiceOptions, service: Mapping[str, Any]) -> Endpoint:
    """Work out the endpoints of ``service`` (a Service manifest mapping)."""
    spec = service.get("spec") or {}
    status = service.get("status") or {}
    cluster_ip = spec.get("clusterIP", "") or ""
    worker = opts.worker_node_ip or "localhost"

    node_port = cluster_port = 0
    for port in spec.get("ports") or ():
        node_port = port.get("nodePort", 0) or 0
        cluster_port = port.get("port", 0) or 0
        if opts.port_selector and port.get("name") == opts.port_selector:
            break

    internal = HostPort(cluster_ip, cluster_port)
    external = HostPort(worker, node_port)

    ingress = (status.get("loadBalancer") or {}).get("ingress") or []
    if ingress and any(ingress[0].values()):
        first = ingress[0]
        ip = first.get("ip", "") or ""
        if not ip:
            external = HostPort(first.get("hostname", "") or "", cluster_port)
        elif ip in (cluster_ip, "<pending>"):
            if opts.api_server_url:
                external = HostPort(_api_server_host(opts.api_server_url), node_port)
            else:
                external = HostPort(cluster_ip, cluster_port)
        else:
            external = HostPort(ip, cluster_port)

    if external.port == 0:
        return Endpoint(internal=internal)

    if not tcp_check(external, opts.mock) and external.address != "localhost":
        # Fall back to the API server host, as on single-node clusters.
        external.address = _api_server_host(opts.api_server_url)
        if not tcp_check(external, opts.mock) and external.address != "localhost":
            external.port = node_port
            if not tcp_check(external, opts.mock):
                raise err_endpoint_not_found()

    return Endpoint(internal=internal, external=external)


def get_service_endpoint(client: ServiceClient, opts: ServiceOptions) -> Endpoint:
    """Fetch the named service through ``client`` and return its endpoints."""
    try:
        service = client.get_service(opts.namespace, opts.name)
    except Exception as exc:
        raise err_service_discovery(exc) from exc
    return get_endpoint(opts, service)