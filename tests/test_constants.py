import pytest

from ssmkit.constants import (
    Command,
    OpenMode,
    PacketType,
    ProxyOpenMode,
    TidError,
)
from ssmkit.errors import error_for_code


@pytest.mark.parametrize(
    "flags, expected",
    [(0x20, OpenMode.READ), (0x40, OpenMode.WRITE), (0xA0, OpenMode.READ_BUFFER)],
)
def test_open_mode_values(flags, expected):
    mode = OpenMode.from_flags(flags)
    assert mode == expected
    assert int(mode) == flags


def test_read_buffer_combines_read_and_exclusive():
    combined = int(OpenMode.READ) | int(OpenMode.EXCLUSIVE)
    assert OpenMode.from_flags(combined) == OpenMode.READ_BUFFER


@pytest.mark.parametrize(
    "flags, expected",
    [
        (0x21, OpenMode.READ),
        (0x4F, OpenMode.WRITE),
        (0xA5, OpenMode.READ_BUFFER),
        (0x180, OpenMode.EXCLUSIVE),
    ],
)
def test_from_flags_masks_low_and_high_bits(flags, expected):
    assert OpenMode.from_flags(flags) == expected


def test_from_flags_zero_is_empty_mode():
    assert int(OpenMode.from_flags(0)) == 0


def test_from_flags_result_within_mask():
    for flags in range(0, 0x200, 7):
        mode = OpenMode.from_flags(flags)
        assert int(mode) & ~int(OpenMode.MODE_MASK) == 0


def test_tid_errors_match_error_codes():
    for member in TidError:
        assert error_for_code(member).code == member.value


def test_command_codes_fixed_by_protocol():
    assert Command(0) is Command.NULL
    assert Command(30) is Command.FAIL
    assert Command(31) is Command.RES


def test_command_codes_unique_and_ordered():
    values = [c.value for c in Command]
    assert values == sorted(values)
    assert len(set(values)) == len(values)
    assert [Command(v) for v in values] == list(Command)


def test_proxy_and_packet_types():
    assert ProxyOpenMode(1) is ProxyOpenMode.WRITE_MODE
    assert ProxyOpenMode(4) is ProxyOpenMode.BUFFER_MODE
    assert PacketType(0) is PacketType.TIME_ID
    assert [PacketType(i) for i in range(len(PacketType))] == list(PacketType)