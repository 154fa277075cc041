"""Ports: contracts implemented by the infrastructure layer."""
