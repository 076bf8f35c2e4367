"""Test fixtures for object store and sync engine tests.

This module provides builders for:
- list_objects_v2 response pages and entries
- get_object response bodies
- Remote object descriptors and sync configurations
"""

from .sample_objects import (
    BASE_MS,
    BASE_TIME,
    SAMPLE_DOCUMENT,
    at_ms,
    make_body,
    make_config,
    make_descriptor,
    make_entry,
    make_page,
)

__all__ = [
    "BASE_MS",
    "BASE_TIME",
    "SAMPLE_DOCUMENT",
    "at_ms",
    "make_body",
    "make_config",
    "make_descriptor",
    "make_entry",
    "make_page",
]
