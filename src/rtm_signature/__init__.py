"""RTM signature public API.

Builds and signs the canonical messages an RTM server checks for session and
conversation requests, and renders the signed result.

Example:
    from rtm_signature import SigningRequest, sign_request, render_command

    request = SigningRequest.create("add", "app", "alice", "master-key",
                                    conversation_id="conv-1", members="bob:carol")
    result = sign_request(request)
    print(render_command(request.action, result))
"""

from .actions import Action, UnsupportedAction, parse_action
from .canonical_message import build_signature_message, sort_members
from .errors import (
    RtmSignatureError,
    UnsupportedActionError,
    MissingParameterError,
    InvalidCommandError,
)
from .nonce import NONCE_CHARS, generate_nonce
from .result import (
    SignatureResult,
    assemble,
    build_command,
    render_command,
    render_debug,
)
from .request import SigningRequest, check_request, sign_request
from .signer import sign
from .timestamp import current_timestamp

__version__ = "1.0.0"
__all__ = [
    "Action",
    "UnsupportedAction",
    "parse_action",
    "build_signature_message",
    "sort_members",
    "RtmSignatureError",
    "UnsupportedActionError",
    "MissingParameterError",
    "InvalidCommandError",
    "NONCE_CHARS",
    "generate_nonce",
    "current_timestamp",
    "sign",
    "SignatureResult",
    "assemble",
    "build_command",
    "render_command",
    "render_debug",
    "SigningRequest",
    "check_request",
    "sign_request",
]
