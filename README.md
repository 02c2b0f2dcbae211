# tvsc

Small building blocks for moving data through a program. The package has
no dependencies beyond the standard library.

## Modules

- `tvsc.buffer`
  - `Buffer(size, default=0)` is a fixed-size sequence. Every index is
    checked, and a negative or out-of-range index raises `IndexError`.
  - Single elements are read and written with `buffer[i]`, `read` and
    `write`.
  - Bulk copies use `read_into`, `read_slice` and `write_from`.
    `read_into` and `write_from` raise `OverflowError` when the other
    sequence is too short.
  - `compare` returns -1, 0 or 1 over the common prefix of two buffers, or
    over the first `count` elements. `is_equal` and `==` are built on it.
  - `clear` resets every element to the default.
  - `to_string(buffer)` renders the elements in rows of ten.
- `tvsc.ring_buffer`
  - `RingBuffer(page_size, num_pages, prioritize_old_elements=True, data_needed_callback=None, data_available_callback=None)`
    is a paged ring buffer.
  - The data-available callback is called when at least one page of data
    is buffered. The data-needed callback is called when there is room for
    at least one page.
  - A single `consume` or `supply` never crosses a page boundary, so it may
    move fewer elements than were asked for.
  - With `prioritize_old_elements=False`, supplying to a full ring drops the
    oldest elements. Otherwise the surplus is refused.
  - `consume_one`, `peek` and `pop` raise `IndexError` on an empty ring.
  - Other members are `consume_into`, `supply_one`, `elements_available`,
    `full`, `empty`, `mtu`, `buffer_size`, `num_buffers` and
    `max_buffered_elements`.
- `tvsc.clock`
  - `Clock` reads the system's monotonic clock through `current_time_millis`
    and `current_time_micros`, and sleeps with `sleep_ms` and `sleep_us`.
  - `default_clock()` returns a shared instance.
  - The module functions `time_millis`, `time_micros`, `delay_ms` and
    `delay_us` do the same work.
- `tvsc.mock_clock`
  - `MockClock` changes time only when it is set, incremented or "slept" on.
  - Registered `Clockable` subclasses have `update(current_time_us)` called
    on every change.
- `tvsc.remote_clock`
  - `RemoteClock(local_clock)` reports the local time plus a skew.
  - The skew is set with `mark_remote_time_micros`.
- `tvsc.hashing`
  - `hash_combine`, `hash_combine_32` and `hash_combine_64` fold values into
    a seed.
  - `integer_hash`, `integer_hash_32` and `integer_hash_64` mix the bits of
    integers that have little entropy, such as counters.
  - `hash_combine` and `integer_hash` use the platform's word size.
- `tvsc.rng`
  - `set_seed`, `initialize_seed` and `generate_entropy` (32 random bits)
    control and read the random source.
  - `generate_random_value(minimum, maximum)` and
    `generate_random_value_64(minimum, maximum)` return a value in
    `[minimum, maximum)`.
  - Both raise `ValueError` unless `maximum > minimum`.
- `tvsc.file_reader`
  - `FileReader(path, element_size=1)` reads a file as elements of
    `element_size` bytes. Positions and sizes are counted in elements.
  - `read(count)` returns bytes. `read_into(dest, count=None)` fills a
    sequence. Both return whole elements only.
  - `LoopingFileReader` rewinds once when a read finds the file at its end,
    so the file appears endless.
  - Both readers are context managers.
- `tvsc.output`
  - `print_value(value, stream=None)` writes a value to standard output or
    to the given stream.
  - `println(value="", stream=None)` does the same and adds a newline.
  - Floats are written with six significant digits.

## Install

    pip install .

Tests:

    pip install ".[test]"
    pytest

## Example

```python
from tvsc.ring_buffer import RingBuffer

ring = RingBuffer(page_size=8, num_pages=4)
ring.set_data_available_callback(lambda r: print("page ready"))
ring.supply(list(range(8)))          # prints "page ready"
print(ring.consume(8))               # [0, 1, 2, 3, 4, 5, 6, 7]
```

```python
from tvsc.mock_clock import MockClock
from tvsc.remote_clock import RemoteClock

local = MockClock()
local.set_current_time_micros(100)
remote = RemoteClock(local)
remote.mark_remote_time_micros(58)
print(remote.current_time_micros())  # 58
```

## Command

    tvsc-random

By default it prints a random unsigned 64-bit value every 500 ms until it is
interrupted. The options are:

- `--count N` stops after N values.
- `--delay-ms MS` changes the pause between values.

## What it does not do

The package does not talk to hardware: there is no GPIO, SPI or EEPROM
access. There is also no blocking reader that waits for a `RingBuffer` to
fill. Callers poll the ring, or react to its callbacks themselves.