"""Helpers for Kubernetes manifests, Service endpoints, chart directories and compose files, with structured errors."""

__version__ = "0.1.0"