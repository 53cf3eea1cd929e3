"""Endpoint path templates for the configuration REST API."""
