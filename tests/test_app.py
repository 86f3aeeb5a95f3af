from unittest import mock

import pytest

from stripcast.app import NUM_COLUMNS, STRIP_HEIGHT, App, main
from stripcast.pixels import RED, WHITE
from stripcast.sender import DEFAULT_TARGETS, UDPSender


class FakeSocket:
    def __init__(self):
        self.sent = []
        self.closed = False

    def sendto(self, data, target):
        self.sent.append((data, target))
        return len(data)

    def close(self):
        self.closed = True


def make_app():
    sock = FakeSocket()
    return App(UDPSender(NUM_COLUMNS, STRIP_HEIGHT, 1, sock=sock)), sock


def test_setup_fills_shared_data():
    app, _ = make_app()
    app.setup()
    assert app.shared.max_white == 255
    assert app.shared.mid_white == 127
    assert (app.shared.num_columns, app.shared.strip_height) == (NUM_COLUMNS, STRIP_HEIGHT)
    assert app.state_machine.current.name == "TestState"
    assert (app.frame.width, app.frame.height) == (NUM_COLUMNS, STRIP_HEIGHT)


def test_update_before_setup_raises():
    app, _ = make_app()
    with pytest.raises(RuntimeError):
        app.update()


def test_update_renders_and_sends():
    app, sock = make_app()
    app.setup()
    app.update()
    assert app.frame_num == 1
    assert app.frame.get(1, 0) == RED
    assert app.frame.get(5, STRIP_HEIGHT - 1) == WHITE
    assert [target for _, target in sock.sent] == list(DEFAULT_TARGETS)
    assert sock.sent[0][0] == app.sender.outputs[0].to_bytes()


def test_run_counts_frames():
    app, sock = make_app()
    app.run(frames=3, fps=0)
    assert app.frame_num == 3
    assert len(sock.sent) == 2 * app.frame_num


def test_red_column_steps_over_time():
    app, _ = make_app()
    app.run(frames=21, fps=None)
    assert app.state_machine.current.cnt == 2
    assert app.frame.get(2, 0) == RED


def test_main_streams_and_closes():
    with mock.patch("socket.socket") as socket_cls:
        assert main(["--frames", "2", "--fps", "0"]) == 0
    instance = socket_cls.return_value
    assert instance.sendto.call_count == 4
    assert instance.close.called
    targets = [call.args[1] for call in instance.sendto.call_args_list]
    assert targets == list(DEFAULT_TARGETS) * 2