import signal
from unittest import mock

import pytest

from sigtalk.client import main, send_message
from sigtalk.protocol import SIGNAL_ONE, SIGNAL_ZERO, BitDecoder, encode_message


@pytest.fixture
def kill():
    with mock.patch("sigtalk.client.os.kill") as fake_kill:
        yield fake_kill


@pytest.fixture
def sleep():
    with mock.patch("sigtalk.client.time.sleep") as fake_sleep:
        yield fake_sleep


def test_send_single_char_bit_order(kill, sleep):
    sent = send_message(4242, "A", 0.0)
    assert sent == 8
    signals = [c.args for c in kill.call_args_list]
    assert signals == [
        (4242, SIGNAL_ZERO),
        (4242, SIGNAL_ONE),
        (4242, SIGNAL_ZERO),
        (4242, SIGNAL_ZERO),
        (4242, SIGNAL_ZERO),
        (4242, SIGNAL_ZERO),
        (4242, SIGNAL_ZERO),
        (4242, SIGNAL_ONE),
    ]


def test_send_sleeps_after_every_signal(kill, sleep):
    sent = send_message(77, "hey", 0.25)
    assert sent == 24
    assert sleep.call_count == kill.call_count == sent
    assert all(c.args == (0.25,) for c in sleep.call_args_list)


def test_send_matches_encoder(kill, sleep):
    send_message(5, "hello", 0.0)
    assert [c.args[1] for c in kill.call_args_list] == list(encode_message("hello"))


def test_send_round_trip_through_decoder(kill, sleep):
    send_message(9, "round trip!", 0.0)
    decoder = BitDecoder()
    received = bytes(
        b for b in (decoder.feed(c.args[1]) for c in kill.call_args_list) if b is not None
    )
    assert received == b"round trip!"


def test_send_empty_message(kill, sleep):
    assert send_message(9, "", 0.0) == 0
    assert kill.call_count == 0


@pytest.mark.parametrize("pid", [0, -1])
def test_send_rejects_bad_pid(kill, sleep, pid):
    with pytest.raises(ValueError):
        send_message(pid, "x", 0.0)
    assert kill.call_count == 0


def test_send_rejects_negative_delay(kill, sleep):
    with pytest.raises(ValueError):
        send_message(9, "x", -1.0)


def test_main_wrong_argument_count(capsys, kill, sleep):
    assert main(["123"]) == 1
    assert "Usage" in capsys.readouterr().err
    assert kill.call_count == 0


@pytest.mark.parametrize("pid_text", ["0", "-5", "abc"])
def test_main_invalid_pid(capsys, kill, sleep, pid_text):
    assert main([pid_text, "msg"]) == 1
    assert capsys.readouterr().err == "Invalid PID\n"
    assert kill.call_count == 0


def test_main_sends_message(kill, sleep):
    assert main(["  +4242xyz", "hi"]) == 0
    assert kill.call_count == 16
    assert {c.args[0] for c in kill.call_args_list} == {4242}


def test_main_reports_unreachable_process(capsys, kill, sleep):
    kill.side_effect = ProcessLookupError(3, "No such process")
    assert main(["4242", "hi"]) == 1
    assert "4242" in capsys.readouterr().err


def test_main_prints_ack_and_restores_handlers(capsys, sleep):
    before = signal.getsignal(SIGNAL_ONE)
    calls = []

    def fake_kill(pid, signo):
        calls.append((pid, signo))
        if len(calls) == 1:
            signal.raise_signal(SIGNAL_ONE)

    with mock.patch("sigtalk.client.os.kill", side_effect=fake_kill):
        assert main(["4242", "a"]) == 0
    assert len(calls) == 8
    assert "Received ACK from server." in capsys.readouterr().out
    assert signal.getsignal(SIGNAL_ONE) == before