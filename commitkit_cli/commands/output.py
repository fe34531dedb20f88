"""
Shared helpers for CLI command output.
"""

from __future__ import annotations

import json
from typing import Any


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def encode_items(items: list[str]) -> list[bytes]:
    """Encode CLI item arguments as UTF-8 payloads."""
    return [item.encode("utf-8") for item in items]


def print_json(data: dict[str, Any]) -> None:
    print(json.dumps(data, indent=2))
