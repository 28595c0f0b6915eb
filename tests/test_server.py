import io
import os
import signal
from unittest import mock

import pytest

from sigtalk.protocol import encode_message
from sigtalk.server import Server


def _signals(text):
    return [signal.SIGUSR1 if bit else signal.SIGUSR2 for bit in encode_message(text)]


def test_message_is_written_with_newline():
    out = io.BytesIO()
    server = Server(out)
    for signum in _signals("hello"):
        server.handle_signal(signum, None)
    assert out.getvalue() == b"hello\n"


def test_consecutive_messages():
    out = io.BytesIO()
    server = Server(out)
    for signum in _signals("one") + _signals("two"):
        server.handle_signal(signum, None)
    assert out.getvalue() == b"one\ntwo\n"


def test_utf8_bytes_pass_through():
    out = io.BytesIO()
    server = Server(out)
    text = "\u00fcber"
    for signum in _signals(text):
        server.handle_signal(signum, None)
    assert out.getvalue().decode("utf-8") == text + "\n"


def test_partial_byte_writes_nothing():
    out = io.BytesIO()
    server = Server(out)
    for signum in _signals("A")[:7]:
        server.handle_signal(signum, None)
    assert out.getvalue() == b""
    assert server.decoder.pending == 7


def test_serve_forever_prints_pid_and_restores_handlers(capsys):
    before = signal.getsignal(signal.SIGUSR1)
    server = Server(io.BytesIO())
    installed = []

    def fake_pause():
        installed.append(signal.getsignal(signal.SIGUSR1))
        raise KeyboardInterrupt

    with mock.patch("signal.pause", side_effect=fake_pause):
        with pytest.raises(KeyboardInterrupt):
            server.serve_forever()
    assert installed == [server.handle_signal]
    assert signal.getsignal(signal.SIGUSR1) == before
    assert capsys.readouterr().out == f"PID of my server : [{os.getpid()}]\n"


def test_real_signals_are_decoded(capsys):
    out = io.BytesIO()
    server = Server(out)
    delivered = []

    def fake_pause():
        for signum in _signals("ok"):
            os.kill(os.getpid(), signum)
        delivered.append(True)
        raise KeyboardInterrupt

    with mock.patch("signal.pause", side_effect=fake_pause):
        with pytest.raises(KeyboardInterrupt):
            server.serve_forever()
    assert delivered == [True]
    assert out.getvalue() == b"ok\n"