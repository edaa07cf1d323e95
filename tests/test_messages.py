import struct

import pytest

from ssmkit.constants import MSQ_CMD, MSQ_RES, SNAME_MAX, Command
from ssmkit.messages import (
    ObserverMessage,
    SsmEdgeMessage,
    SsmMessage,
    ThreadMessage,
    TimeControl,
)


def test_ssm_message_round_trip():
    msg = SsmMessage(
        msg_type=MSQ_CMD,
        res_type=MSQ_RES,
        cmd_type=Command.CREATE,
        name="sensor_A",
        suid=0,
        ssize=24,
        hsize=120,
        time=0.1,
        save_time=10.0,
    )
    raw = msg.pack()
    assert len(raw) == SsmMessage.SIZE
    back = SsmMessage.unpack(raw)
    assert back == msg
    assert back.cmd_type == Command.CREATE


def test_ssm_message_is_packed_without_padding():
    raw = SsmMessage().pack()
    assert len(raw) == 88
    assert SsmMessage.BODY_SIZE == len(raw) - 8


def test_ssm_message_header_bytes():
    raw = SsmMessage(msg_type=MSQ_CMD, name="intSsm").pack()
    assert raw[:8] == struct.pack("<q", MSQ_CMD)
    assert raw[20:26] == b"intSsm"
    assert raw[26:52] == bytes(26)


def test_name_of_full_length_round_trips():
    name = "n" * SNAME_MAX
    assert SsmMessage.unpack(SsmMessage(name=name).pack()).name == name


def test_name_too_long_is_rejected():
    with pytest.raises(ValueError):
        SsmMessage(name="x" * (SNAME_MAX + 1)).pack()
    with pytest.raises(ValueError):
        SsmEdgeMessage(name="y" * (SNAME_MAX + 1)).pack()


def test_unsigned_field_rejects_negative():
    with pytest.raises(ValueError):
        SsmMessage(ssize=-1).pack()
    with pytest.raises(ValueError):
        ObserverMessage(msg_size=-5).pack()


def test_unpack_wrong_length_is_rejected():
    raw = SsmMessage().pack()
    with pytest.raises(ValueError):
        SsmMessage.unpack(raw[:-1])
    with pytest.raises(ValueError):
        ThreadMessage.unpack(raw)


def test_edge_message_round_trip():
    msg = SsmEdgeMessage(
        msg_type=MSQ_CMD,
        cmd_type=Command.EDGE_LIST_INFO,
        name="sensor_B",
        suid=2,
        node1=3,
        node2=4,
    )
    back = SsmEdgeMessage.unpack(msg.pack())
    assert back == msg
    assert len(msg.pack()) == SsmEdgeMessage.SIZE


def test_observer_message_round_trip():
    msg = ObserverMessage(msg_type=7, res_type=8, cmd_type=2, pid=4321, msg_size=64)
    assert ObserverMessage.unpack(msg.pack()) == msg


def test_thread_message_round_trip_and_alignment():
    msg = ThreadMessage(msg_type=1, res_type=2, tid=-3, time=12.5)
    raw = msg.pack()
    assert ThreadMessage.unpack(raw) == msg
    assert raw[20:24] == bytes(4)
    assert raw[24:] == struct.pack("<d", 12.5)


def test_time_control_round_trip():
    ctl = TimeControl(offset=-2.5, speed=2.0, is_pause=True, pausetime=100.25)
    back = TimeControl.unpack(ctl.pack())
    assert back == ctl
    assert back.is_pause is True


def test_time_control_defaults_play_at_normal_speed():
    back = TimeControl.unpack(TimeControl().pack())
    assert back.speed == 1.0
    assert back.is_pause is False
    assert back.offset == 0.0


def test_all_layouts_are_multiple_of_eight():
    for cls in (SsmMessage, SsmEdgeMessage, ObserverMessage, ThreadMessage, TimeControl):
        assert len(cls().pack()) % 8 == 0
        assert len(cls().pack()) == cls.SIZE