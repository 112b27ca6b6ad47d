"""Endpoint classes used by the discovery and mapping tests."""
