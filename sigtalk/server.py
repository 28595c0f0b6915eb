"""Server that prints messages received as SIGUSR1/SIGUSR2 bit streams."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence
from types import FrameType
from typing import BinaryIO

from sigtalk.printf import printf
from sigtalk.protocol import BitDecoder


class Server:
    """Decodes incoming signals and writes the bytes they carry to ``output``.

    Each message's terminating zero byte is written as a newline.
    """

    def __init__(self, output: BinaryIO | None = None) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.decoder = BitDecoder()

    def handle_signal(self, signum: int, frame: FrameType | None) -> None:
        """Take one bit: SIGUSR1 is 1, any other signal is 0."""
        value = self.decoder.feed(signum == signal.SIGUSR1)
        if value is None:
            return
        self.output.write(bytes([value]) if value else b"\n")
        self.output.flush()

    def serve_forever(self) -> None:
        """Print this process's PID and handle signals until interrupted.

        Previous signal handlers are restored on exit.
        """
        printf("PID of my server : [%d]\n", os.getpid())
        previous = {
            signum: signal.signal(signum, self.handle_signal)
            for signum in (signal.SIGUSR1, signal.SIGUSR2)
        }
        try:
            while True:
                signal.pause()
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server until interrupted from the keyboard."""
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())