#!/usr/bin/env python3
"""
cli.py — rtm-signature command line

Usage:
  rtm-signature <action> [options]

Actions:
  open     Sign a session open request
  start    Sign a conversation start request
  add      Sign a member invite request
  remove   Sign a member kick request

Prints exactly one line on stdout: the debug record, or with --cmd-output the
JSON command ready to send to the RTM server.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .actions import UnsupportedAction, parse_action
from .config import Settings
from .errors import RtmSignatureError
from .request import SigningRequest, sign_request
from .result import render_command, render_debug

logger = logging.getLogger(__name__)

_OPTION_FLAGS = {
    "app_id": "--appid",
    "client_id": "--clientid",
    "conversation_id": "--convid",
    "members": "--members",
    "master_key": "--masterkey",
}


def _fail_with_error(err: RtmSignatureError) -> None:
    """Print a structured error message from an ``RtmSignatureError`` and exit.

    Args:
        err: Structured signing error.

    Returns:
        None: This function terminates the process.
    """
    context = f" Context: {err.context}." if err.context else ""
    print(f"ERROR: {err.code}. {err.message}{context}", file=sys.stderr)
    sys.exit(1)


def _action_arg(value: str) -> str:
    """argparse type for the action positional; returns the lowercased name."""
    parsed = parse_action(value)
    if isinstance(parsed, UnsupportedAction):
        raise argparse.ArgumentTypeError(
            f"invalid action {value!r} (choose from open, start, add, remove)"
        )
    return parsed.value


def _configure_logging(verbose: bool, settings: Settings) -> None:
    level = logging.DEBUG if verbose else settings.logging_level
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the argument parser, using ``settings`` for option defaults."""
    parser = argparse.ArgumentParser(
        prog="rtm-signature",
        description="RTM signature tool: sign session and conversation requests",
    )
    parser.add_argument("action", type=_action_arg, help="open, start, add or remove (case-insensitive)")
    parser.add_argument("--appid", default=settings.app_id, help="Application id [env: RTM_APP_ID]")
    parser.add_argument("--clientid", default=settings.client_id, help="Client (peer) id [env: RTM_CLIENT_ID]")
    parser.add_argument("--convid", help="Conversation id (add, remove)")
    parser.add_argument("--members", help="Colon-separated member ids (start, add, remove)")
    parser.add_argument(
        "--masterkey",
        default=settings.master_key,
        help="Master key used for signing [env: RTM_MASTER_KEY]",
    )
    parser.add_argument(
        "--cmd-output",
        action="store_true",
        help="Print the JSON command instead of the debug record",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _request_from_args(args: argparse.Namespace) -> SigningRequest:
    return SigningRequest.create(
        action=args.action,
        app_id=args.appid,
        client_id=args.clientid,
        master_key=args.masterkey,
        conversation_id=args.convid,
        members=args.members,
    )


def cmd_sign(args: argparse.Namespace) -> str:
    """Sign the request described by ``args`` and return the output line.

    Args:
        args: Parsed CLI arguments.

    Returns:
        str: Debug record, or JSON command when ``--cmd-output`` is set.

    Raises:
        RtmSignatureError: If the request cannot be signed or rendered.
    """
    request = _request_from_args(args)
    result = sign_request(request)
    logger.info("Signed %s request for client %s", args.action, result.client_id)
    if args.cmd_output:
        return render_command(request.action, result)
    return render_debug(result)


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entrypoint.

    Parses arguments, signs the request and prints the result line. Usage
    errors exit with status 2, signing errors with status 1.
    """
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, settings)

    missing = _request_from_args(args).missing_parameters()
    if missing:
        flags = ", ".join(_OPTION_FLAGS[name] for name in missing)
        parser.error(f"the following options are required for {args.action}: {flags}")

    try:
        line = cmd_sign(args)
    except RtmSignatureError as err:
        _fail_with_error(err)
    print(line)


if __name__ == "__main__":
    main()
