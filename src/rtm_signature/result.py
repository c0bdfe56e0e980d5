"""
result.py — Signature result record and output rendering

A ``SignatureResult`` bundles the request fields with the timestamp, nonce and
signature that were signed together. It is rendered either as a debug record
or as the JSON command a client sends to the RTM server.

Command shapes:
  open    {"cmd":"session","op":"open","appId","peerId","t","n","s"}
  start   {"cmd":"conv","op":"start","appId","peerId","t","n","s","m"}
  add     {"cmd":"conv","op":"add",...,"m","cid"}
  remove  {"cmd":"conv","op":"remove",...,"m","cid"}

``m`` keeps the caller's member order. The signature covers the sorted order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .actions import Action, ParsedAction, parse_action
from .canonical_json import command_dumps
from .canonical_message import split_members
from .errors import UnsupportedActionError
from .validation import validate_command


@dataclass(frozen=True)
class SignatureResult:
    app_id: str
    client_id: str
    conversation_id: str
    members: str
    timestamp: int
    nonce: str
    signature: str
    action: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "app_id": self.app_id,
            "client_id": self.client_id,
            "conversation_id": self.conversation_id,
            "members": self.members,
            "timestamp": self.timestamp,
            "nonce": self.nonce,
            "signature": self.signature,
        }
        if self.action is not None:
            data["action"] = self.action
        return data


def assemble(
    app_id: str,
    client_id: str,
    conversation_id: str,
    members: str,
    timestamp: int,
    nonce: str,
    signature: str,
    action: Optional[str] = None,
) -> SignatureResult:
    """Bundle signed values into a ``SignatureResult`` without transforming them."""
    return SignatureResult(
        app_id=app_id,
        client_id=client_id,
        conversation_id=conversation_id,
        members=members,
        timestamp=timestamp,
        nonce=nonce,
        signature=signature,
        action=action,
    )


def render_debug(result: SignatureResult) -> str:
    """Render every record field as ``key=value`` on a single line.

    String values are quoted with ``repr`` so empty fields stay visible.
    """
    fields = []
    for key, value in result.to_dict().items():
        fields.append(f"{key}={value!r}")
    return "SignatureResult(" + ", ".join(fields) + ")"


def build_command(action: Union[str, ParsedAction], result: SignatureResult) -> Dict[str, Any]:
    """Build the command object for ``action`` from a signed result.

    Args:
        action: Action name (case-insensitive) or parsed action.
        result: Signed record.

    Returns:
        Dict[str, Any]: Command with keys in wire order.

    Raises:
        UnsupportedActionError: If the action is not open/start/add/remove.
    """
    parsed = parse_action(action)
    if not isinstance(parsed, Action):
        raise UnsupportedActionError(parsed.name)

    if parsed is Action.OPEN:
        command: Dict[str, Any] = {"cmd": "session", "op": "open"}
    else:
        command = {"cmd": "conv", "op": parsed.value}

    command.update({
        "appId": result.app_id,
        "peerId": result.client_id,
        "t": result.timestamp,
        "n": result.nonce,
        "s": result.signature,
    })

    if parsed.uses_members:
        command["m"] = split_members(result.members)
    if parsed.uses_conversation:
        command["cid"] = result.conversation_id
    return command


def render_command(action: Union[str, ParsedAction], result: SignatureResult) -> str:
    """Render the validated command for ``action`` as one line of JSON."""
    command = build_command(action, result)
    validate_command(command)
    return command_dumps(command)
