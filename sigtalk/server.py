"""Receiving side: rebuilds messages from incoming user signals."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import BinaryIO, Callable, Optional

from sigtalk.printf import sprintf
from sigtalk.protocol import (
    ACK_SIGNAL,
    ONE_SIGNAL,
    ZERO_SIGNAL,
    ByteAssembler,
    render_byte,
)

Acknowledger = Callable[[int], None]


class Receiver:
    """Turns a stream of signals into bytes written to ``stream``.

    When ``acknowledge`` is given it is called with the sender's PID after
    every bit whose sender is known.
    """

    def __init__(
        self,
        stream: Optional[BinaryIO] = None,
        acknowledge: Optional[Acknowledger] = None,
    ) -> None:
        self._stream = sys.stdout.buffer if stream is None else stream
        self._acknowledge = acknowledge
        self._assembler = ByteAssembler()

    def handle(self, sig: int, sender: Optional[int] = None) -> Optional[int]:
        """Take one signal; return the byte it completed, if any."""
        value = self._assembler.push(1 if sig == ONE_SIGNAL else 0)
        if value is not None:
            self._stream.write(render_byte(value))
            self._stream.flush()
        if self._acknowledge is not None and sender is not None:
            self._acknowledge(sender)
        return value


def _send_ack(pid: int) -> None:
    os.kill(pid, ACK_SIGNAL)


def _next_signal(watched: set[int]) -> tuple[int, Optional[int]]:
    """Wait for one of ``watched``; return it with the sender's PID if known."""
    if hasattr(signal, "sigwaitinfo"):
        info = signal.sigwaitinfo(watched)
        return info.si_signo, info.si_pid
    return signal.sigwait(watched), None


def serve(acknowledge: bool = False, stream: Optional[BinaryIO] = None) -> None:
    """Print this process's PID and receive messages until interrupted."""
    out = sys.stdout.buffer if stream is None else stream
    label = "Bonus Server PID" if acknowledge else "Server PID"
    out.write(sprintf("%s: %d\n", label, os.getpid()).encode("ascii"))
    out.flush()
    receiver = Receiver(out, _send_ack if acknowledge else None)
    watched = {ZERO_SIGNAL, ONE_SIGNAL}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, watched)
    try:
        while True:
            sig, sender = _next_signal(watched)
            receiver.handle(sig, sender)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the server; ``--bonus`` acknowledges every received bit."""
    parser = argparse.ArgumentParser(
        prog="server", description="Receive messages sent as signals."
    )
    parser.add_argument(
        "--bonus", action="store_true", help="acknowledge every bit to the sender"
    )
    args = parser.parse_args(argv)
    try:
        serve(acknowledge=args.bonus)
    except KeyboardInterrupt:
        return 0
    return 0