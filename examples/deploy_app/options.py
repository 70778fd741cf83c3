"""
Option table for the deploy example.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

from argcheck import ARRAY, BOOL, FLOAT, INT, STRING


def parse_endpoint(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"Not an http(s) URL: {value!r}")
    return value


OPTIONS = {
    "replicas": INT,
    "cpu-limit": FLOAT,
    "dry-run": BOOL,
    "ports": INT | ARRAY,
    "tags": STRING | ARRAY,
    "region": re.compile(r"^[a-z]{2}-[a-z]+-[0-9]$"),
    "endpoint": parse_endpoint,
    "api-token": re.compile(r"^[A-Za-z0-9]{16,}$"),
}
