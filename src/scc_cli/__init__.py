"""Declarative configuration client for the Cloud Connector administration API."""

__version__ = "0.1.0"
