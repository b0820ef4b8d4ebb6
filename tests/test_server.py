import io
import os
from types import SimpleNamespace
from unittest import mock

import pytest

from sigtalk.protocol import ACK_SIGNAL, ONE_SIGNAL, ZERO_SIGNAL, encode_message
from sigtalk.server import Receiver, main, serve


def _signals(message):
    return [ONE_SIGNAL if bit else ZERO_SIGNAL for bit in encode_message(message)]


def _infos(message, pid):
    return [SimpleNamespace(si_signo=sig, si_pid=pid) for sig in _signals(message)]


def test_receiver_writes_message_and_newline():
    out = io.BytesIO()
    receiver = Receiver(out)
    for sig in _signals(b"hello"):
        receiver.handle(sig)
    assert out.getvalue() == b"hello\n"


def test_receiver_returns_completed_bytes():
    receiver = Receiver(io.BytesIO())
    results = [receiver.handle(sig) for sig in _signals(b"A")]
    completed = [value for value in results if value is not None]
    assert completed == [ord("A"), 0]


def test_receiver_treats_unknown_signal_as_zero():
    out = io.BytesIO()
    receiver = Receiver(out)
    for sig in _signals(b"k")[:8]:
        receiver.handle(ZERO_SIGNAL if sig == ZERO_SIGNAL else ONE_SIGNAL)
    for _ in range(8):
        receiver.handle(12345)
    assert out.getvalue() == b"k\n"


def test_receiver_acknowledges_every_bit():
    acks = []
    receiver = Receiver(io.BytesIO(), acks.append)
    signals = _signals(b"ab")
    for sig in signals:
        receiver.handle(sig, 4242)
    assert acks == [4242] * len(signals)


def test_receiver_skips_ack_without_sender():
    acks = []
    out = io.BytesIO()
    receiver = Receiver(out, acks.append)
    for sig in _signals(b"x"):
        receiver.handle(sig)
    assert acks == []
    assert out.getvalue() == b"x\n"


def test_receiver_multiple_messages():
    out = io.BytesIO()
    receiver = Receiver(out)
    for sig in _signals(b"one") + _signals(b"two"):
        receiver.handle(sig)
    assert out.getvalue() == b"one\ntwo\n"


def test_serve_prints_pid_and_message():
    out = io.BytesIO()
    events = _infos(b"hi", 77) + [KeyboardInterrupt()]
    with mock.patch("signal.pthread_sigmask"), mock.patch(
        "signal.sigwaitinfo", create=True, side_effect=events
    ), mock.patch("os.kill") as kill:
        with pytest.raises(KeyboardInterrupt):
            serve(False, out)
    assert out.getvalue() == f"Server PID: {os.getpid()}\n".encode() + b"hi\n"
    assert kill.call_count == 0


def test_serve_bonus_acknowledges_sender():
    out = io.BytesIO()
    events = _infos(b"ok", 77) + [KeyboardInterrupt()]
    with mock.patch("signal.pthread_sigmask"), mock.patch(
        "signal.sigwaitinfo", create=True, side_effect=events
    ), mock.patch("os.kill") as kill:
        with pytest.raises(KeyboardInterrupt):
            serve(True, out)
    assert out.getvalue().startswith(b"Bonus Server PID: ")
    assert out.getvalue().endswith(b"ok\n")
    assert kill.call_args_list == [mock.call(77, ACK_SIGNAL)] * 24


def test_main_returns_zero_on_interrupt(capsysbinary):
    with mock.patch("signal.pthread_sigmask"), mock.patch(
        "signal.sigwaitinfo", create=True, side_effect=KeyboardInterrupt()
    ):
        assert main(["--bonus"]) == 0
    assert capsysbinary.readouterr().out.startswith(b"Bonus Server PID: ")


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--nope"])