"""Command that sends a text message to a server process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Union

from sigtalk.protocol import SIGNAL_ONE, SIGNAL_ZERO, encode_message
from sigtalk.text import atoi

DEFAULT_DELAY = 0.001
ACK_MESSAGE = "Received ACK from server.\n"
USAGE = "Usage: ./client <pid> <msg>\n"


def _on_ack(signo: int, frame: object) -> None:
    sys.stdout.write(ACK_MESSAGE)
    sys.stdout.flush()


@contextmanager
def _ack_handlers() -> Iterator[None]:
    """Report every acknowledgement signal while the block runs."""
    previous = {sig: signal.signal(sig, _on_ack) for sig in (SIGNAL_ONE, SIGNAL_ZERO)}
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def send_message(
    pid: int, message: Union[str, bytes], delay: float = DEFAULT_DELAY
) -> int:
    """Send ``message`` to process ``pid``, waiting ``delay`` seconds after each signal.

    Returns the number of signals sent. Raises ValueError for a non-positive pid
    and OSError when the target cannot be signalled.
    """
    if pid <= 0:
        raise ValueError(f"invalid pid: {pid}")
    if delay < 0:
        raise ValueError(f"delay must not be negative: {delay}")
    sent = 0
    for signo in encode_message(message):
        os.kill(pid, signo)
        sent += 1
        time.sleep(delay)
    return sent


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client: ``client <pid> <msg>``. Returns the exit status."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stderr.write(USAGE)
        return 1
    pid_text, message = args
    server_pid = atoi(pid_text)
    if server_pid <= 0:
        sys.stderr.write("Invalid PID\n")
        return 1
    try:
        with _ack_handlers():
            send_message(server_pid, message)
    except OSError as exc:
        sys.stderr.write(f"Cannot signal process {server_pid}: {exc.strerror or exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())