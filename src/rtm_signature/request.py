"""
request.py — Signing requests and the signing pipeline

One invocation reads the clock, draws a nonce, builds the canonical message,
signs it and assembles the result. Values that went into the signature are
carried unchanged into the result.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .actions import Action, ParsedAction, UnsupportedAction, parse_action
from .canonical_message import build_signature_message
from .errors import MissingParameterError, UnsupportedActionError
from .nonce import generate_nonce
from .result import SignatureResult, assemble
from .signer import sign
from .timestamp import Clock, current_timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SigningRequest:
    action: ParsedAction
    app_id: Optional[str]
    client_id: Optional[str]
    master_key: Optional[str] = field(repr=False)
    conversation_id: Optional[str] = None
    members: Optional[str] = None

    @classmethod
    def create(
        cls,
        action: Union[str, ParsedAction],
        app_id: Optional[str],
        client_id: Optional[str],
        master_key: Optional[str],
        conversation_id: Optional[str] = None,
        members: Optional[str] = None,
    ) -> "SigningRequest":
        """Build a request, parsing the action.

        ``None`` marks a parameter that was not supplied. An empty string is a
        supplied value and is signed as an empty segment.
        """
        return cls(
            action=parse_action(action),
            app_id=app_id,
            client_id=client_id,
            master_key=master_key,
            conversation_id=conversation_id,
            members=members,
        )

    def missing_parameters(self) -> List[str]:
        """Return the names of required parameters that were not supplied.

        The master key must also be non-empty; every other parameter may be
        an empty string.
        """
        required = ["app_id", "client_id"]
        if self.action.uses_members:
            required.append("members")
        if self.action.uses_conversation:
            required.append("conversation_id")
        missing = [name for name in required if getattr(self, name) is None]
        if not self.master_key:
            missing.append("master_key")
        return missing


def check_request(request: SigningRequest) -> None:
    """Reject unsupported actions and requests with missing parameters.

    Raises:
        UnsupportedActionError: If the action is not open/start/add/remove.
        MissingParameterError: If a parameter the action needs is absent.
    """
    if isinstance(request.action, UnsupportedAction):
        raise UnsupportedActionError(request.action.name)
    missing = request.missing_parameters()
    if missing:
        raise MissingParameterError(missing)


def sign_request(
    request: SigningRequest,
    *,
    clock: Optional[Clock] = None,
    rng: Optional[random.Random] = None,
) -> SignatureResult:
    """Sign ``request`` and return the assembled result.

    Args:
        request: Checked signing request.
        clock: Optional clock override, see ``current_timestamp``.
        rng: Optional random source, see ``generate_nonce``.

    Returns:
        SignatureResult: Record whose timestamp, nonce and signature match the
        signed canonical message.

    Raises:
        UnsupportedActionError: If the action is not open/start/add/remove.
        MissingParameterError: If a parameter the action needs is absent.
    """
    check_request(request)
    action: Action = request.action  # type: ignore[assignment]
    conversation_id = request.conversation_id or ""
    members = request.members or ""

    ts = current_timestamp(clock)
    n = generate_nonce(rng)
    msg = build_signature_message(
        action,
        request.app_id,
        request.client_id,
        conversation_id,
        members,
        ts,
        n,
    )
    logger.debug("Canonical message for %s: %s", action.value, msg)
    sig = sign(msg, request.master_key)

    return assemble(
        app_id=request.app_id,
        client_id=request.client_id,
        conversation_id=conversation_id,
        members=members,
        timestamp=ts,
        nonce=n,
        signature=sig,
        action=action.value,
    )
