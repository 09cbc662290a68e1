"""Shared utilities: configuration, logging, errors, networking and DataFrame helpers."""
