"""Protocol constants, open modes and command codes."""

from __future__ import annotations

import enum

SNAME_MAX = 32
"""Maximum length in bytes of a stream name."""

SHM_KEY = 0x3292
SHM_TIME_KEY = SHM_KEY - 1
MSQ_KEY = 0x3292

MSQ_CMD = 1000
MSQ_RES = 1001
MSQ_RES_MAX = 2000
MSQ_BUF_SIZE = 30

SSM_MARGIN = 1
SSM_BUFFER_MARGIN = 1.2
SSM_TID_SP = 0

SERVER_PORT = 8080
SERVER_IP = 0x00000000
BR_PORT = 12345
MAXRECVSTRING = 256


class OpenMode(enum.IntFlag):
    """Flags given when a stream is opened."""

    READ = 0x20
    WRITE = 0x40
    EXCLUSIVE = 0x80
    READ_BUFFER = 0xA0
    MODE_MASK = 0xF0

    @classmethod
    def from_flags(cls, flags: int) -> "OpenMode":
        """Extract the mode bits from a raw flag value."""
        return cls(int(flags) & int(cls.MODE_MASK))


class TidError(enum.IntEnum):
    """Negative time-id results that signal an error."""

    FUTURE = -1
    PAST = -2
    NO_DATA = -3


class Command(enum.IntEnum):
    """Commands carried in coordinator messages."""

    NULL = 0
    VERSION_GET = 1
    INITIALIZE = 2
    TERMINATE = 3
    CREATE = 4
    DESTROY = 5
    OPEN = 6
    CLOSE = 7
    STREAM_PROPERTY_SET = 8
    STREAM_PROPERTY_GET = 9
    GET_TID = 10
    STREAM_LIST_NUM = 11
    STREAM_LIST_INFO = 12
    STREAM_LIST_NAME = 13
    NODE_LIST_NUM = 14
    NODE_LIST_INFO = 15
    EDGE_LIST_NUM = 16
    EDGE_LIST_INFO = 17
    OFFSET = 18
    TCPCONNECTION = 19
    UDPCONNECTION = 20
    ADDINFO = 21
    GETINFOSIZE = 22
    GETINFO = 23
    FAIL = 30
    RES = 31


class ProxyOpenMode(enum.IntEnum):
    """Modes a proxy client opens a stream in."""

    WRITE_MODE = 1
    READ_MODE = 2
    PROXY_INIT = 3
    BUFFER_MODE = 4


class PacketType(enum.IntEnum):
    """Kinds of packets exchanged between proxy and client."""

    TIME_ID = 0
    REAL_TIME = 1
    READ_NEXT = 2
    SSM_ID = 3
    TID_REQ = 4
    TOP_TID_REQ = 5
    BOTTOM_TID_REQ = 6
    PACKET_FAILED = 7
    WRITE_PACKET = 8
    TMC_RES = 9
    TMC_FAIL = 10