"""Server that prints its pid and writes out the bytes clients send it, bit by bit."""

from __future__ import annotations

import os
import signal
import sys
from contextlib import suppress
from typing import BinaryIO, Optional, Sequence

from sigtalk.protocol import SIGNAL_ONE, SIGNAL_ZERO, BitDecoder


class Server:
    """Decodes incoming signals into bytes and acknowledges every signal."""

    def __init__(self, output: Optional[BinaryIO] = None) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.decoder = BitDecoder()

    def _write(self, data: bytes) -> None:
        self.output.write(data)
        self.output.flush()

    def receive(self, signo: int, sender: int) -> Optional[int]:
        """Handle one signal from ``sender``; return the byte it completed, if any.

        Every signal is acknowledged with SIGUSR1; a sender that has gone away
        is ignored.
        """
        byte = self.decoder.feed(signo)
        if byte is not None:
            self._write(bytes([byte]))
        with suppress(ProcessLookupError):
            os.kill(sender, SIGNAL_ONE)
        return byte

    def serve(self) -> None:
        """Print the pid, then receive signals until interrupted."""
        self._write(f"{os.getpid()}\n".encode("ascii"))
        signals = {SIGNAL_ONE, SIGNAL_ZERO}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                self.receive(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until interrupted. Returns the exit status."""
    try:
        Server().serve()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())