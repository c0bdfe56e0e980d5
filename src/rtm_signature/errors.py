"""
errors.py — RTM Signature Error Taxonomy

Coded errors raised by the signing pipeline. The CLI turns them into a
single ``ERROR:`` line and a non-zero exit status.
"""

from typing import Optional, List

__all__ = [
    "RtmSignatureError",
    "UnsupportedActionError",
    "MissingParameterError",
    "InvalidCommandError",
]

class RtmSignatureError(Exception):
    """Base class for all signing-related errors."""
    def __init__(
        self,
        code: str,
        message: str,
        context: Optional[str] = None,
    ):
        self.code = code
        self.message = message
        self.context = context

        full_msg = f"[{code}] {message}"
        if context:
            full_msg += f" Context: {context}"

        super().__init__(full_msg)

# Action Errors (E0xx)
class UnsupportedActionError(RtmSignatureError):
    def __init__(self, action: str):
        self.action = action
        super().__init__(
            "RTM_E001",
            "Unsupported action for command rendering; expected one of open, start, add, remove.",
            f"action={action!r}",
        )

# Request Errors (E1xx)
class MissingParameterError(RtmSignatureError):
    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            "RTM_E100",
            "A required request parameter is absent or empty.",
            "missing=" + ",".join(self.missing),
        )

# Output Errors (E2xx)
class InvalidCommandError(RtmSignatureError):
    def __init__(self, context: Optional[str] = None):
        super().__init__("RTM_E200", "The rendered command does not match the command schema.", context)
