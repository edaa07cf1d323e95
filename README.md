# ssmkit

Building blocks for sharing time-stamped sensor streams. A stream is a
history of fixed-size records. Each record has a time id (TID) that counts up
from 0, and each record has a timestamp.

The package has five modules:

- `ssmkit.errors` holds the errors for reading by TID. `SSMError` is the base
  class and carries a numeric `code`. Its subclasses are `FutureError` (-1),
  `PastError` (-2) and `NoDataError` (-3).
  - `error_for_code(code)` returns the matching exception instance.
  - An unknown negative code gives a plain `SSMError` that carries that code.
  - A non-negative code raises `ValueError`.
- `ssmkit.constants` holds the protocol constants:
  - Module-level constants: `SNAME_MAX`, `SHM_KEY`, `MSQ_CMD`, `SERVER_PORT`, `BR_PORT` and others.
  - Enums: `OpenMode` (with `OpenMode.from_flags(flags)` to mask out the mode bits), `TidError`, `Command`, `ProxyOpenMode` and `PacketType`.
- `ssmkit.messages` holds the message records `SsmMessage`, `SsmEdgeMessage`,
  `ObserverMessage`, `ThreadMessage` and `TimeControl`. They are dataclasses with
  little-endian, fixed-size binary layouts.
  - `pack()` returns bytes.
  - The class method `unpack(data)` builds a record from exactly `SIZE` bytes.
  - Wrong lengths, out-of-range values and stream names longer than 32 bytes raise `ValueError`.
- `ssmkit.ringbuffer` holds `RingBuffer`, a history of values and timestamps with a fixed size.
- `ssmkit.sensortypes` holds the sample records `Ultrasonic`, `SensorA`,
  `SensorAProperty`, `SensorB`, `IntSsm`, `DoubleProperty`, `IntSsmProperty` and
  `Props`. They have the same `pack()` / `unpack()` interface as the message records.

The package has no dependencies outside the standard library. The `test`
extra installs pytest.

## Ring buffer

`RingBuffer(buffer_size=16)` keeps `buffer_size` slots. Its properties are:

- `size`: the number of slots.
- `top`: the newest TID, or -1 before the first write.
- `bottom`: the oldest readable TID. One slot is kept as margin for an entry that is still being written.

The methods are:

- `write(data, tid=None, time=None)` stores a value.
  - Without a `tid`, the value goes after the current top entry.
  - With a `tid`, that TID becomes the new top.
  - When `time` is given, the timestamp is stored too.
  - It returns the TID it used.
- `write_time(tid, time)` and `read_time(tid)` set and read a timestamp only.
- `read(tid=-1)` returns `(value, tid, time)`. A negative TID means the newest entry.
- `tid_at(time)` returns the newest TID whose timestamp is not later than `time`.
- Reads and lookups raise `NoDataError`, `FutureError` or `PastError` when the entry is not available.
- `resize(buffer_size)` sets a new size and restarts TID counting. A size of 0 or less raises `ValueError`.
- `reset()` deallocates the buffer. Until it is resized, every access raises `RuntimeError`.

```python
from ssmkit.ringbuffer import RingBuffer
from ssmkit.errors import PastError

buf = RingBuffer(16)
for tid in range(20):
    buf.write(tid * 10, tid, 100.0 + tid)

data, tid, time = buf.read(-1)      # (190, 19, 119.0)
tid = buf.tid_at(105.5)             # 5

try:
    buf.read(0)                     # already overwritten
except PastError:
    pass
```

## Messages and sensor records

```python
from ssmkit.messages import SsmMessage
from ssmkit.constants import Command
from ssmkit.sensortypes import SensorA

msg = SsmMessage(msg_type=1000, res_type=1001, cmd_type=Command.OPEN, name="sensor_A")
assert SsmMessage.unpack(msg.pack()) == msg
assert len(msg.pack()) == SsmMessage.SIZE

raw = SensorA(a=0.1, b=0.01, c=1).pack()
print(SensorA.unpack(raw))
```

## What the package does not do

`ssmkit` has no coordinator process and does not create shared-memory
segments or message queues. It has no network proxy or client and no command-line
programs. It gives the layouts, constants, errors and the ring buffer that such
parts would use. Moving the bytes between processes is left to the application.