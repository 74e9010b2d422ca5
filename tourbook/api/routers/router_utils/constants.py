"""Shared routing constants."""

API_PREFIX = "/api/v1"
