"""Command that sends a text message to a server process bit by bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Sequence

from sigtalk.ctype import atoi, is_digit
from sigtalk.printf import printf
from sigtalk.protocol import encode_message

DEFAULT_DELAY = 125e-6


def is_pid(text: str) -> bool:
    """True when ``text`` holds nothing but decimal digits."""
    return all(is_digit(ch) for ch in text)


def send_message(pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Signal ``message`` and its terminating zero byte to process ``pid``.

    Raises OSError (such as ProcessLookupError) when a signal cannot be sent.
    """
    for bit in encode_message(message):
        os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client with ``argv``: a server PID and a message."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("we need 3 arguments")
        return 0
    pid_text, message = args
    if not is_pid(pid_text):
        return printf("PID SHOULD ONLY CONATAIN DIGITS")
    try:
        send_message(atoi(pid_text), os.fsencode(message))
    except OSError as error:
        print(f"cannot signal process {pid_text}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())