"""
actions.py — RTM session and conversation actions

  open    Open a client session            (cmd "session")
  start   Start a conversation             (cmd "conv")
  add     Invite members to a conversation (cmd "conv", token "invite")
  remove  Kick members from a conversation (cmd "conv", token "kick")

Raw action strings are matched case-insensitively exactly once, in
``parse_action``. Anything else becomes an ``UnsupportedAction`` that callers
must handle explicitly.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Action(Enum):
    OPEN = "open"
    START = "start"
    ADD = "add"
    REMOVE = "remove"

    @property
    def uses_conversation(self) -> bool:
        """True when the conversation id is part of the signed message."""
        return self in (Action.ADD, Action.REMOVE)

    @property
    def uses_members(self) -> bool:
        return self is not Action.OPEN

    @property
    def trailing_token(self) -> Optional[str]:
        if self is Action.ADD:
            return "invite"
        if self is Action.REMOVE:
            return "kick"
        return None


@dataclass(frozen=True)
class UnsupportedAction:
    name: str

    @property
    def value(self) -> str:
        return self.name

    uses_conversation = False
    uses_members = True
    trailing_token = None


ParsedAction = Union[Action, UnsupportedAction]


def parse_action(raw: Union[str, Action, UnsupportedAction]) -> ParsedAction:
    """Resolve a raw action string to an ``Action`` or ``UnsupportedAction``.

    Args:
        raw: Action as typed by the caller, or an already parsed variant.

    Returns:
        ParsedAction: Matching ``Action`` member, otherwise
        ``UnsupportedAction`` carrying the lowercased name.
    """
    if isinstance(raw, (Action, UnsupportedAction)):
        return raw
    normalized = raw.lower()
    try:
        return Action(normalized)
    except ValueError:
        return UnsupportedAction(normalized)
