"""Helpers for exercising a Harbor registry through its REST API and the docker CLI."""

__version__ = "0.1.0"