"""Data and property records written to the sample streams."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar


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


def _encode_text(text: str, limit: int) -> bytes:
    raw = text.encode("utf-8")
    if len(raw) > limit:
        raise ValueError(f"text longer than {limit} bytes: {text!r}")
    return raw


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Ultrasonic:
    """Distances measured by four ultrasonic sensors and the measuring time."""

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<5d")
    SIZE: ClassVar[int] = LAYOUT.size

    front: float = 0.0
    back: float = 0.0
    left: float = 0.0
    right: float = 0.0
    time: float = 0.0

    def pack(self) -> bytes:
        return _pack(self.LAYOUT, self.front, self.back, self.left, self.right, self.time)

    @classmethod
    def unpack(cls, data: bytes) -> "Ultrasonic":
        return cls(*_unpack(cls.LAYOUT, data, "Ultrasonic"))


@dataclass
class SensorA:
    """Sample record of sensor A."""

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<ddi4x")
    SIZE: ClassVar[int] = LAYOUT.size

    a: float = 0.0
    b: float = 0.0
    c: int = 0

    def pack(self) -> bytes:
        return _pack(self.LAYOUT, self.a, self.b, self.c)

    @classmethod
    def unpack(cls, data: bytes) -> "SensorA":
        return cls(*_unpack(cls.LAYOUT, data, "SensorA"))


@dataclass
class SensorAProperty:
    """Property record of sensor A: a value and a name of up to 10 bytes."""

    NAME_SIZE: ClassVar[int] = 10
    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<d10s6x")
    SIZE: ClassVar[int] = LAYOUT.size

    a: float = 0.0
    name: str = ""

    def pack(self) -> bytes:
        return _pack(self.LAYOUT, self.a, _encode_text(self.name, self.NAME_SIZE))

    @classmethod
    def unpack(cls, data: bytes) -> "SensorAProperty":
        a, name = _unpack(cls.LAYOUT, data, "SensorAProperty")
        return cls(a, _decode_text(name))


@dataclass
class SensorB:
    """Sample record of sensor B."""

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<di4x")
    SIZE: ClassVar[int] = LAYOUT.size

    a: float = 0.0
    b: int = 0

    def pack(self) -> bytes:
        return _pack(self.LAYOUT, self.a, self.b)

    @classmethod
    def unpack(cls, data: bytes) -> "SensorB":
        return cls(*_unpack(cls.LAYOUT, data, "SensorB"))


@dataclass
class IntSsm:
    """Record of the integer counter stream."""

    STREAM_NAME: ClassVar[str] = "intSsm"
    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<i")
    SIZE: ClassVar[int] = LAYOUT.size

    num: int = 0

    def pack(self) -> bytes:
        return _pack(self.LAYOUT, self.num)

    @classmethod
    def unpack(cls, data: bytes) -> "IntSsm":
        return cls(*_unpack(cls.LAYOUT, data, "IntSsm"))


@dataclass
class DoubleProperty:
    """Property holding a single floating-point number."""

    PROPERTY_NAME: ClassVar[str] = "doubleProperty"
    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<d")
    SIZE: ClassVar[int] = LAYOUT.size

    dnum: float = 0.0

    def pack(self) -> bytes:
        return _pack(self.LAYOUT, self.dnum)

    @classmethod
    def unpack(cls, data: bytes) -> "DoubleProperty":
        return cls(*_unpack(cls.LAYOUT, data, "DoubleProperty"))


@dataclass
class IntSsmProperty:
    """Property of the integer stream: an integer and a floating-point number."""

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<i4xd")
    SIZE: ClassVar[int] = LAYOUT.size

    num1: int = 0
    num2: float = 0.0

    def pack(self) -> bytes:
        return _pack(self.LAYOUT, self.num1, self.num2)

    @classmethod
    def unpack(cls, data: bytes) -> "IntSsmProperty":
        return cls(*_unpack(cls.LAYOUT, data, "IntSsmProperty"))


@dataclass
class Props:
    """Combined property: integer, floating-point number and a name of up to 20 bytes."""

    NAME_SIZE: ClassVar[int] = 20
    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<i4xd20s4x")
    SIZE: ClassVar[int] = LAYOUT.size

    num: int = 0
    dnum: float = 0.0
    name: str = ""

    def pack(self) -> bytes:
        return _pack(
            self.LAYOUT, self.num, self.dnum, _encode_text(self.name, self.NAME_SIZE)
        )

    @classmethod
    def unpack(cls, data: bytes) -> "Props":
        num, dnum, name = _unpack(cls.LAYOUT, data, "Props")
        return cls(num, dnum, _decode_text(name))