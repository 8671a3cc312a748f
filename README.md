# meshkitutils

Helpers for Kubernetes resources and the files that sit around them. They work on plain
Python mappings (decoded YAML or JSON manifests) and on files. None of them opens a
connection to a cluster by itself.

## What is in the package

- **Structured errors** (`meshkitutils.errors`, `meshkitutils.kube_errors`).
  `MeshKitError` is an `Exception`. It carries a `code`, a `Severity` (`ALERT` or `FATAL`),
  `short_description`, `long_description`, `probable_cause` and `suggested_remediation`.
  Functions such as `err_read_file`, `err_no_version` and `err_service_discovery` build these
  errors and return them. The rest of the package raises them.
- **Service endpoints** (`meshkitutils.service`). `get_endpoint(opts, service)` takes a
  Service manifest mapping and returns an `Endpoint` holding `internal` and `external`
  `HostPort` values. It honours `ServiceOptions.port_selector`, load-balancer ingress,
  `api_server_url` and `worker_node_ip`. A Service with no node or load-balancer port gets
  an internal endpoint only. `tcp_check` probes reachability with a real TCP connection. If
  a `MockOptions(desired_endpoint=...)` is given, it compares against that endpoint instead.
  `get_service_endpoint(client, opts)` fetches the Service through any object that has a
  `get_service(namespace, name)` method.
- **Exposing workloads** (`meshkitutils.expose`).
  - `map_based_selector`, `protocols_for_object` and `ports_for_object` read Pods,
    ReplicationControllers, Services, Deployments and ReplicaSets (`apps` and `extensions`
    API versions).
  - `can_be_exposed(group, kind)` raises for kinds that cannot be exposed.
  - `generate_service(config, selectors, labels, protocols, ports)` builds a Service
    manifest from an `ExposeConfig`, using `ServiceType` and `SessionAffinity`.
- **Manifests** (`meshkitutils.manifest`).
  - `split_manifests` splits multi-document text on `\n---\n`.
  - `object_from_manifest` decodes one document and requires a `kind`.
  - `ApplyOptions` holds namespace, update, delete and ignore-errors settings.
- **Custom resources** (`meshkitutils.crd`).
  - `custom_resources_from_list` parses a JSON CRD list into `GroupVersionResource` values.
    Each value uses the first version of its CRD.
  - `gvr_for_custom_resource` handles a single item.
  - `is_crd` recognises a CustomResourceDefinition.
- **Chart directories** (`meshkitutils.helm`).
  - `extract_sem_ver` pulls a trailing `vX.Y.Z` out of a version constraint.
  - `is_helm_chart` looks for `Chart.yaml` or `Chart.yml`.
  - `write_to_file` copies a file to a binary stream, followed by a document separator.
- **Compose files** (`meshkitutils.kompose`).
  - `validate_compose_file` checks a compose file against a JSON schema that you supply.
  - `version_check` requires a declared version no newer than 3.3.
  - `format_compose_file` reduces a file to its version, written as a string.
  - `format_converted_manifest` splits a `List` manifest into its items.
- **Resource kinds** (`meshkitutils.describe`). `resource_kind` maps a `DescribeType` to its
  `GroupKind`.
- **Small helpers**.
  - `meshkitutils.events.EventStreamer` fans out every `publish`ed item to each channel
    registered with `subscribe`. A channel is anything with `put`, such as `queue.Queue`.
    Delivery runs on background threads.
  - `meshkitutils.git.read_git_version(path)` returns `(version, commit_head)` from a CSV
    `version` file. It returns empty strings when the file is missing or malformed.

## What it does not do

The package does not talk to a cluster. It does not:

- load kubeconfig files;
- apply, update or delete manifests;
- create Services;
- describe resources.

For those operations you pass in a client of your own, as with `get_service_endpoint`. The
package does not render or dry-run Helm charts, and it does not convert compose files into
Kubernetes manifests. It does not download schemas: `validate_compose_file` needs the schema
text handed to it. There is no command-line program.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Examples

Find the endpoints of a Service:

```python
from meshkitutils.service import MockOptions, ServiceOptions, get_endpoint

service = {
    "spec": {
        "clusterIP": "10.0.0.5",
        "ports": [{"name": "http", "port": 80, "nodePort": 30080}],
    },
}
opts = ServiceOptions(port_selector="http", mock=MockOptions(desired_endpoint="localhost:30080"))
endpoint = get_endpoint(opts, service)
print(endpoint.internal, endpoint.external)  # 10.0.0.5:80 localhost:30080
```

Split a multi-document manifest:

```python
from meshkitutils.manifest import split_manifests

docs = split_manifests(b"kind: A\n---\nkind: B\n")  # ["kind: A", "kind: B\n"]
```

Handle an error:

```python
from meshkitutils.errors import MeshKitError
from meshkitutils.kompose import version_check

try:
    version_check(b"services: {}\n")
except MeshKitError as exc:
    print(exc.code, exc.severity)  # meshkit-11232 Severity.ALERT
```

## Running the tests

```
pytest
```