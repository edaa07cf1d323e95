"""Fixed-layout messages exchanged with the coordinator and proxies."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from .constants import SNAME_MAX, Command


def _pack(layout: struct.Struct, *values) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


def _unpack(layout: struct.Struct, data: bytes, kind: str) -> tuple:
    data = bytes(data)
    if len(data) != layout.size:
        raise ValueError(f"{kind} needs {layout.size} bytes, got {len(data)}")
    return layout.unpack(data)


def _encode_name(name: str) -> bytes:
    raw = name.encode("utf-8")
    if len(raw) > SNAME_MAX:
        raise ValueError(f"stream name longer than {SNAME_MAX} bytes: {name!r}")
    return raw


def _decode_name(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class SsmMessage:
    """Command message sent to and answered by the coordinator."""

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<qqi32siQQdd")
    SIZE: ClassVar[int] = LAYOUT.size
    BODY_SIZE: ClassVar[int] = LAYOUT.size - 8

    msg_type: int = 0
    res_type: int = 0
    cmd_type: int = Command.NULL
    name: str = ""
    suid: int = 0
    ssize: int = 0
    hsize: int = 0
    time: float = 0.0
    save_time: float = 0.0

    def pack(self) -> bytes:
        return _pack(
            self.LAYOUT,
            self.msg_type,
            self.res_type,
            int(self.cmd_type),
            _encode_name(self.name),
            self.suid,
            self.ssize,
            self.hsize,
            self.time,
            self.save_time,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "SsmMessage":
        msg, res, cmd, name, suid, ssize, hsize, time, save = _unpack(
            cls.LAYOUT, data, "SsmMessage"
        )
        return cls(msg, res, cmd, _decode_name(name), suid, ssize, hsize, time, save)


@dataclass
class SsmEdgeMessage:
    """Message describing an edge between two nodes of the stream graph."""

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<qi32siii")
    SIZE: ClassVar[int] = LAYOUT.size

    msg_type: int = 0
    cmd_type: int = Command.NULL
    name: str = ""
    suid: int = 0
    node1: int = 0
    node2: int = 0

    def pack(self) -> bytes:
        return _pack(
            self.LAYOUT,
            self.msg_type,
            int(self.cmd_type),
            _encode_name(self.name),
            self.suid,
            self.node1,
            self.node2,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "SsmEdgeMessage":
        msg, cmd, name, suid, node1, node2 = _unpack(cls.LAYOUT, data, "SsmEdgeMessage")
        return cls(msg, cmd, _decode_name(name), suid, node1, node2)


@dataclass
class ObserverMessage:
    """Command header sent between observers; a body of ``msg_size`` bytes follows."""

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<QQIiQ")
    SIZE: ClassVar[int] = LAYOUT.size

    msg_type: int = 0
    res_type: int = 0
    cmd_type: int = 0
    pid: int = 0
    msg_size: int = 0

    def pack(self) -> bytes:
        return _pack(
            self.LAYOUT,
            self.msg_type,
            self.res_type,
            int(self.cmd_type),
            self.pid,
            self.msg_size,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "ObserverMessage":
        return cls(*_unpack(cls.LAYOUT, data, "ObserverMessage"))


@dataclass
class ThreadMessage:
    """Message passed between proxy threads: a time id and its timestamp."""

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<QQi4xd")
    SIZE: ClassVar[int] = LAYOUT.size

    msg_type: int = 0
    res_type: int = 0
    tid: int = 0
    time: float = 0.0

    def pack(self) -> bytes:
        return _pack(self.LAYOUT, self.msg_type, self.res_type, self.tid, self.time)

    @classmethod
    def unpack(cls, data: bytes) -> "ThreadMessage":
        return cls(*_unpack(cls.LAYOUT, data, "ThreadMessage"))


@dataclass
class TimeControl:
    """Shared time-control state: offset, playback speed and pause."""

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<ddi4xd")
    SIZE: ClassVar[int] = LAYOUT.size

    offset: float = 0.0
    speed: float = 1.0
    is_pause: bool = False
    pausetime: float = 0.0

    def pack(self) -> bytes:
        return _pack(
            self.LAYOUT, self.offset, self.speed, int(bool(self.is_pause)), self.pausetime
        )

    @classmethod
    def unpack(cls, data: bytes) -> "TimeControl":
        offset, speed, is_pause, pausetime = _unpack(cls.LAYOUT, data, "TimeControl")
        return cls(offset, speed, bool(is_pause), pausetime)