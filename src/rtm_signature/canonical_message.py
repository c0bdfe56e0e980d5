"""
canonical_message.py — RTM signature message canonicalization

Builds the exact string that is signed. The server recomputes the same string
from the request it receives, so the layout is fixed:

  appid:clientid[:convid]:<members>:<timestamp>:<nonce>[:invite|:kick]

- convid is present only for add and remove
- members is empty for open, otherwise the member list sorted by codepoint
- invite is appended for add, kick for remove

IMPORTANT: Changing the order, the separator or the member sort breaks every
signature the server checks.
"""

from __future__ import annotations
from typing import List, Union

from .actions import ParsedAction, parse_action

SEPARATOR = ":"


def split_members(members: str) -> List[str]:
    """Split a colon-separated member list, keeping empty segments."""
    return members.split(SEPARATOR)


def sort_members(members: str) -> str:
    """Return the member list sorted by codepoint and rejoined with ``:``.

    An empty input yields a single empty segment, i.e. ``""``.
    """
    return SEPARATOR.join(sorted(split_members(members)))


def build_signature_message(
    action: Union[str, ParsedAction],
    app_id: str,
    client_id: str,
    conversation_id: str,
    members: str,
    timestamp: int,
    nonce: str,
) -> str:
    """Return the canonical message for an RTM action.

    Args:
        action: Action name (case-insensitive) or a parsed action.
        app_id: Application identifier.
        client_id: Client (peer) identifier.
        conversation_id: Conversation identifier; only used by add/remove.
        members: Colon-separated member list; ignored for open.
        timestamp: Seconds since the Unix epoch.
        nonce: Per-request random token.

    Returns:
        str: Colon-joined canonical message.
    """
    parsed = parse_action(action)
    parts: List[str] = [app_id, client_id]
    if parsed.uses_conversation:
        parts.append(conversation_id)

    if parsed.uses_members:
        parts.append(sort_members(members))
    else:
        parts.append("")

    parts.append(str(timestamp))
    parts.append(nonce)

    token = parsed.trailing_token
    if token is not None:
        parts.append(token)

    return SEPARATOR.join(parts)
