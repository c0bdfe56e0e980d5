"""
config.py — Environment defaults for the rtm-signature CLI

  RTM_APP_ID      default for --appid
  RTM_CLIENT_ID   default for --clientid
  RTM_MASTER_KEY  default for --masterkey
  RTM_LOG_LEVEL   logging level name or number when --verbose is not
                  given (WARNING)

Command-line options always win over the environment.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    app_id: Optional[str] = None
    client_id: Optional[str] = None
    master_key: Optional[str] = field(default=None, repr=False)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            app_id=env.get("RTM_APP_ID") or None,
            client_id=env.get("RTM_CLIENT_ID") or None,
            master_key=env.get("RTM_MASTER_KEY") or None,
            log_level=(env.get("RTM_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )

    @property
    def logging_level(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        if self.log_level.isdigit():
            return int(self.log_level)
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING
