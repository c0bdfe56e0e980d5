"""
test_request.py — Signing pipeline tests with a fixed clock and seeded RNG
"""

import logging
import random
from datetime import datetime, timezone

import pytest

from rtm_signature.actions import Action, UnsupportedAction
from rtm_signature.canonical_message import build_signature_message
from rtm_signature.errors import MissingParameterError, UnsupportedActionError
from rtm_signature.nonce import generate_nonce
from rtm_signature.request import SigningRequest, check_request, sign_request
from rtm_signature.result import build_command
from rtm_signature.signer import sign


def fixed_clock():
    return datetime(2015, 1, 1, tzinfo=timezone.utc)


def test_create_parses_action_and_defaults():
    req = SigningRequest.create("ADD", "A1", "C1", "key", conversation_id=None, members=None)
    assert req.action is Action.ADD
    assert req.conversation_id is None
    assert req.members is None


def test_master_key_not_in_repr():
    req = SigningRequest.create("open", "A1", "C1", "super-secret")
    assert "super-secret" not in repr(req)


@pytest.mark.parametrize(
    "action,kwargs,missing",
    [
        ("open", {}, []),
        ("start", {}, ["members"]),
        ("start", {"members": "a"}, []),
        ("add", {"members": "a"}, ["conversation_id"]),
        ("remove", {}, ["members", "conversation_id"]),
        ("add", {"members": "a", "conversation_id": "CV1"}, []),
    ],
)
def test_missing_parameters_per_action(action, kwargs, missing):
    req = SigningRequest.create(action, "A1", "C1", "key", **kwargs)
    assert req.missing_parameters() == missing


def test_missing_core_parameters():
    req = SigningRequest.create("open", None, None, "")
    assert req.missing_parameters() == ["app_id", "client_id", "master_key"]
    with pytest.raises(MissingParameterError) as e:
        check_request(req)
    assert e.value.missing == ["app_id", "client_id", "master_key"]
    assert "missing=app_id,client_id,master_key" in str(e.value)


def test_check_request_rejects_unsupported_action():
    req = SigningRequest.create("query", "A1", "C1", "key", members="a")
    assert isinstance(req.action, UnsupportedAction)
    with pytest.raises(UnsupportedActionError):
        check_request(req)


def test_sign_request_matches_manual_pipeline():
    req = SigningRequest.create("add", "A1", "C1", "master", conversation_id="CV1", members="b:a")
    result = sign_request(req, clock=fixed_clock, rng=random.Random(3))

    expected_nonce = generate_nonce(random.Random(3))
    expected_msg = build_signature_message("add", "A1", "C1", "CV1", "b:a", 1420070400, expected_nonce)

    assert result.timestamp == 1420070400
    assert result.nonce == expected_nonce
    assert result.signature == sign(expected_msg, "master")
    assert result.action == "add"
    assert result.members == "b:a"


def test_sign_request_deterministic_with_injected_sources():
    req = SigningRequest.create("start", "A1", "C1", "master", members="b:a")
    first = sign_request(req, clock=fixed_clock, rng=random.Random(11))
    second = sign_request(req, clock=fixed_clock, rng=random.Random(11))
    assert first == second


def test_rendered_fields_agree_with_signed_message():
    req = SigningRequest.create("remove", "A1", "C1", "master", conversation_id="CV1", members="z:y")
    result = sign_request(req, clock=fixed_clock, rng=random.Random(5))
    cmd = build_command(req.action, result)
    msg = build_signature_message(req.action, "A1", "C1", "CV1", "z:y", cmd["t"], cmd["n"])
    assert cmd["s"] == sign(msg, "master")
    assert cmd["m"] == ["z", "y"]


def test_sign_request_logs_message_not_key(caplog):
    req = SigningRequest.create("open", "A1", "C1", "super-secret")
    with caplog.at_level(logging.DEBUG, logger="rtm_signature.request"):
        result = sign_request(req, clock=fixed_clock, rng=random.Random(1))
    assert f"A1:C1::1420070400:{result.nonce}" in caplog.text
    assert "super-secret" not in caplog.text


def test_sign_request_raises_before_signing():
    req = SigningRequest.create("start", "A1", "C1", "master")

    def exploding_clock():
        raise AssertionError("clock must not be read")

    with pytest.raises(MissingParameterError):
        sign_request(req, clock=exploding_clock)


@pytest.mark.parametrize(
    "action,kwargs",
    [
        ("start", {"members": ""}),
        ("add", {"members": "", "conversation_id": ""}),
        ("open", {}),
    ],
)
def test_empty_values_are_supplied_not_missing(action, kwargs):
    req = SigningRequest.create(action, "", "", "key", **kwargs)
    assert req.missing_parameters() == []
    check_request(req)


def test_empty_master_key_is_missing():
    req = SigningRequest.create("open", "A1", "C1", "")
    assert req.missing_parameters() == ["master_key"]


def test_start_with_empty_members_signs_empty_segment():
    req = SigningRequest.create("start", "A1", "C1", "master", members="")
    result = sign_request(req, clock=fixed_clock, rng=random.Random(9))
    msg = f"A1:C1::1420070400:{result.nonce}"
    assert build_signature_message("start", "A1", "C1", "", "", 1420070400, result.nonce) == msg
    assert result.signature == sign(msg, "master")
    assert result.members == ""
    assert build_command(req.action, result)["m"] == [""]


def test_add_with_empty_members_signs_empty_segment():
    req = SigningRequest.create("add", "A1", "C1", "master", conversation_id="CV1", members="")
    result = sign_request(req, clock=fixed_clock, rng=random.Random(9))
    msg = f"A1:C1:CV1::1420070400:{result.nonce}:invite"
    assert result.signature == sign(msg, "master")
    assert build_command(req.action, result)["m"] == [""]


def test_absent_optional_fields_recorded_as_empty():
    req = SigningRequest.create("open", "A1", "C1", "master")
    result = sign_request(req, clock=fixed_clock, rng=random.Random(2))
    assert result.conversation_id == ""
    assert result.members == ""
