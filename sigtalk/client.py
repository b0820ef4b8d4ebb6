"""Sending side: transmits a message to a server process bit by bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Optional, Union

from sigtalk.numbers import atoi
from sigtalk.printf import printf
from sigtalk.protocol import ACK_SIGNAL, ONE_SIGNAL, ZERO_SIGNAL, encode_message

_DIGITS = "0123456789"
DEFAULT_DELAY = 0.0005


class ClientError(Exception):
    """A PID given to the client cannot be used."""


def is_valid_pid(text: Optional[str]) -> bool:
    """True when ``text`` is non-empty and made only of decimal digits."""
    return bool(text) and all(ch in _DIGITS for ch in text)


def parse_pid(text: str) -> int:
    """Read a server PID, raising :class:`ClientError` when it is unusable."""
    if not is_valid_pid(text):
        raise ClientError("PID must contain only digits (0-9).")
    pid = atoi(text)
    if pid <= 0:
        raise ClientError("Invalid PID.")
    return pid


def _check_alive(pid: int) -> None:
    try:
        os.kill(pid, 0)
    except (OSError, OverflowError) as exc:
        raise ClientError("Invalid PID.") from exc


def signals_for(message: Union[bytes, str]) -> list[int]:
    """The signals that carry ``message`` and its terminating NUL."""
    return [ONE_SIGNAL if bit else ZERO_SIGNAL for bit in encode_message(message)]


def send_message(
    pid: int,
    message: Union[bytes, str],
    acknowledged: bool = False,
    delay: float = DEFAULT_DELAY,
) -> None:
    """Send ``message`` to process ``pid``.

    Without acknowledgements each signal is followed by a pause of
    ``delay`` seconds. With them the next bit is sent only once the
    receiver has answered the previous one, and ``delay`` is not used.
    """
    signals = signals_for(message)
    if not acknowledged:
        for sig in signals:
            os.kill(pid, sig)
            time.sleep(delay)
        return
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, {ACK_SIGNAL})
    try:
        for sig in signals:
            os.kill(pid, sig)
            signal.sigwait({ACK_SIGNAL})
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[list[str]] = None) -> int:
    """Send a message: ``client [--bonus] PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    acknowledged = bool(args) and args[0] == "--bonus"
    if acknowledged:
        args = args[1:]
    if len(args) != 2:
        printf("Usage: client [--bonus] [PID] [message]\n")
        return 1
    pid_text, message = args
    try:
        pid = parse_pid(pid_text)
        _check_alive(pid)
    except ClientError as exc:
        printf("Error: %s\n", str(exc))
        return 1
    send_message(pid, os.fsencode(message), acknowledged)
    if acknowledged:
        printf("Message sent successfully!\n")
    return 0