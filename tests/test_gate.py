import threading

import pytest

from _01_core.decision import ActionKind, Decision, MeldClaim, MeldType
from _01_core.exceptions import DispatchStatusError, UnknownActionError, UnsupportedMeldTypeError, UserCancelledError
from _03_automation.channel import SimulatedChannel
from _03_automation.gate import ExecutionGate

from conftest import RecordingChannel, enabled_config

NO_WAIT = enabled_config(confirm_actions=False, delay_seconds=0.0)


def _accept(decision):
    return True


def _reject(decision):
    return False


def test_pass_is_a_no_op(recording_channel):
    reports = []
    gate = ExecutionGate(channel=recording_channel, confirm=_reject, reporter=reports.append)
    outcome = gate.apply(Decision.pass_action("disabled"), enabled_config())
    assert outcome.dispatched is False
    assert recording_channel.calls == []
    assert reports == []


def test_rejection_cancels_without_dispatch(recording_channel):
    gate = ExecutionGate(channel=recording_channel, confirm=_reject)
    decision = Decision(action=ActionKind.DISCARD, tile=4, confidence=0.9, reason="test")
    with pytest.raises(UserCancelledError):
        gate.apply(decision, enabled_config(confirm_actions=True, delay_seconds=0.0))
    assert recording_channel.calls == []


def test_confirmation_then_dispatch(recording_channel):
    asked = []
    gate = ExecutionGate(channel=recording_channel, confirm=lambda d: asked.append(d) or True)
    decision = Decision(action=ActionKind.DISCARD, tile=4, confidence=0.9, reason="test")
    outcome = gate.apply(decision, enabled_config(confirm_actions=True, delay_seconds=0.0))
    assert asked == [decision]
    assert recording_channel.calls == [("discard", 4)]
    assert outcome.dispatched is True
    assert outcome.simulated is False


def test_confirmation_skipped_when_disabled(recording_channel):
    gate = ExecutionGate(channel=recording_channel, confirm=_reject)
    gate.apply(Decision(action=ActionKind.AGARI, confidence=1.0, reason="test"), NO_WAIT)
    assert recording_channel.calls == [("agari",)]


def test_without_channel_execution_is_simulated():
    reports = []
    gate = ExecutionGate(confirm=_reject, reporter=reports.append)
    decision = Decision(action=ActionKind.RIICHI, tile=None, confidence=0.85, reason="ready")
    outcome = gate.apply(decision, NO_WAIT)
    assert outcome.dispatched is True
    assert outcome.simulated is True
    assert "simulated" in outcome.detail
    assert reports[-1] == "simulated riichi"
    assert isinstance(gate.channel, SimulatedChannel)


def test_report_describes_decision(recording_channel):
    reports = []
    gate = ExecutionGate(channel=recording_channel, reporter=reports.append)
    gate.apply(Decision(action=ActionKind.DISCARD, tile=31, confidence=0.5, reason="why"), NO_WAIT)
    assert reports[0].startswith("[auto] discard 5z (White)")
    assert "50.0%" in reports[0]
    assert "low" in reports[0]
    assert "reason: why" in reports[0]


def test_meld_uses_claimed_shape(recording_channel):
    gate = ExecutionGate(channel=recording_channel)
    claim = MeldClaim(meld_type=MeldType.CHI, target_tile=2, combination=(0, 1, 2))
    decision = Decision(action=ActionKind.MELD, tile=2, confidence=0.75, reason="chi", meld=claim)
    gate.apply(decision, NO_WAIT)
    assert recording_channel.calls == [("meld", MeldType.CHI, 2, (0, 1, 2))]


def test_meld_without_claim_is_rejected(recording_channel):
    gate = ExecutionGate(channel=recording_channel)
    decision = Decision(action=ActionKind.MELD, tile=2, confidence=0.75, reason="chi")
    with pytest.raises(UnsupportedMeldTypeError):
        gate.apply(decision, NO_WAIT)
    assert recording_channel.calls == []


def test_riichi_with_tile_declares_then_discards(recording_channel):
    gate = ExecutionGate(channel=recording_channel)
    gate.apply(Decision(action=ActionKind.RIICHI, tile=4, confidence=0.85, reason="ready"), NO_WAIT)
    assert recording_channel.calls == [("riichi",), ("discard", 4)]


def test_discard_without_tile_is_unknown(recording_channel):
    gate = ExecutionGate(channel=recording_channel)
    with pytest.raises(UnknownActionError):
        gate.apply(Decision(action=ActionKind.DISCARD, tile=None, confidence=0.9, reason="?"), NO_WAIT)


def test_channel_failure_propagates_unchanged():
    error = DispatchStatusError(503)
    gate = ExecutionGate(channel=RecordingChannel(error=error))
    with pytest.raises(DispatchStatusError) as excinfo:
        gate.apply(Decision(action=ActionKind.AGARI, confidence=1.0, reason="win"), NO_WAIT)
    assert excinfo.value is error


def test_attach_and_detach(recording_channel):
    gate = ExecutionGate()
    gate.attach(recording_channel)
    assert gate.channel is recording_channel
    gate.attach(None)
    assert isinstance(gate.channel, SimulatedChannel)


def test_delay_is_cancellable(recording_channel):
    gate = ExecutionGate(channel=recording_channel)
    timer = threading.Timer(0.05, gate.cancel)
    timer.start()
    try:
        with pytest.raises(UserCancelledError):
            gate.apply(
                Decision(action=ActionKind.AGARI, confidence=1.0, reason="win"),
                enabled_config(confirm_actions=False, delay_seconds=10.0),
            )
    finally:
        timer.cancel()
    assert recording_channel.calls == []
    assert gate.cancelled


def test_short_delay_then_dispatch(recording_channel):
    gate = ExecutionGate(channel=recording_channel)
    gate.apply(
        Decision(action=ActionKind.AGARI, confidence=1.0, reason="win"),
        enabled_config(confirm_actions=False, delay_seconds=0.01),
    )
    assert recording_channel.calls == [("agari",)]
