"""
validation.py — JSON Schema for RTM command payloads

Every command rendered with ``--cmd-output`` is checked against
``COMMAND_SCHEMA`` before it is printed.
"""

from __future__ import annotations
from typing import Any, Dict

from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from .errors import InvalidCommandError

_SIGNED_FIELDS = {
    "appId": {"type": "string"},
    "peerId": {"type": "string"},
    "t": {"type": "integer"},
    "n": {"type": "string", "minLength": 1},
    "s": {"type": "string", "pattern": "^[0-9a-f]{40}$"},
}

_MEMBERS = {"type": "array", "items": {"type": "string"}}

COMMAND_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "RTM signed command",
    "oneOf": [
        {
            "type": "object",
            "properties": {
                "cmd": {"const": "session"},
                "op": {"const": "open"},
                **_SIGNED_FIELDS,
            },
            "required": ["cmd", "op", "appId", "peerId", "t", "n", "s"],
            "additionalProperties": False,
        },
        {
            "type": "object",
            "properties": {
                "cmd": {"const": "conv"},
                "op": {"const": "start"},
                **_SIGNED_FIELDS,
                "m": _MEMBERS,
            },
            "required": ["cmd", "op", "appId", "peerId", "t", "n", "s", "m"],
            "additionalProperties": False,
        },
        {
            "type": "object",
            "properties": {
                "cmd": {"const": "conv"},
                "op": {"enum": ["add", "remove"]},
                **_SIGNED_FIELDS,
                "m": _MEMBERS,
                "cid": {"type": "string"},
            },
            "required": ["cmd", "op", "appId", "peerId", "t", "n", "s", "m", "cid"],
            "additionalProperties": False,
        },
    ],
}

_validator = Draft7Validator(COMMAND_SCHEMA)


def validate_command(command: Dict[str, Any]) -> None:
    """Raise ``InvalidCommandError`` if ``command`` does not match the schema."""
    first = best_match(_validator.iter_errors(command))
    if first is None:
        return
    path_str = ".".join(str(p) for p in first.path) or "<root>"
    raise InvalidCommandError(f"{path_str}: {first.message}")
