# dispatchkit

Building blocks for a dispatch runtime. The package covers four things:

- how time values are encoded and moved;
- the type tags and flags that dispatch objects carry;
- how a requested queue width becomes a concrete number;
- when a timer schedule fires next.

It has no dependencies outside the standard library.

## Installation

```
pip install dispatchkit
```

To run the test suite:

```
pip install "dispatchkit[test]"
pytest
```

## Time values (`dispatchkit.clock`)

A dispatch time is an unsigned 64-bit integer. Its values mean:

| Value | Meaning |
| --- | --- |
| `TIME_NOW` (`0`) | now |
| `TIME_FOREVER` (`2**64 - 1`) | never |
| reads as a non-negative signed 64-bit number | ticks on the absolute clock |
| reads as a negative signed 64-bit number | negated wall-clock nanoseconds since the epoch |

The absolute clock is `time.monotonic_ns()`. The wall clock is `time.time_ns()`, truncated to microseconds.

```python
from dispatchkit.clock import (
    NSEC_PER_SEC, TIME_NOW, TIME_FOREVER,
    dispatch_time, walltime, timeout, absolute_time, wall_nanoseconds,
)

deadline = dispatch_time(TIME_NOW, 2 * NSEC_PER_SEC)  # two seconds from now
remaining = timeout(deadline)                          # nanoseconds left, 0 once passed

wall = walltime(None, 5 * NSEC_PER_SEC)                # five seconds from now, wall clock
fixed = walltime((1_700_000_000, 0), 0)                # a given (seconds, nanoseconds)
later = dispatch_time(wall, NSEC_PER_SEC)              # stays on the wall clock
```

### Moving a time with `dispatch_time(when, delta)`

- `when` of `TIME_FOREVER` stays `TIME_FOREVER`.
- `when` of `0` starts from `absolute_time()`.
- A move that overflows gives `TIME_FOREVER`.
- A move that underflows stops early:
  - on the absolute clock it gives `1`;
  - on the wall clock it gives `TIME_FOREVER - 1`.

### `walltime(when, delta)`

It follows the same rule. If the total is at or below 1 ns, the result is:

- `TIME_FOREVER` when `delta >= 0`;
- `TIME_FOREVER - 1` otherwise.

### `timeout(when)`

- `timeout(TIME_FOREVER)` returns `TIME_FOREVER`.
- `timeout(0)` returns `0`.

### Arguments and errors

Arguments must be plain integers:

- `when` must fit in 64 bits unsigned;
- `delta` must fit in 64 bits signed.

A value of the wrong type raises `TypeError`, and a value out of range raises `ValueError`.

### `Timebase(numer, denom)`

`Timebase` converts between clock ticks and nanoseconds, with `ns = ticks * numer / denom`. Both `numer` and `denom` must lie between 1 and `2**32 - 1`.

- `to_nanoseconds(ticks)` wraps at 64 bits.
- `from_nanoseconds(nsec)` saturates at the signed 64-bit limits.

The functions above use a 1:1 timebase.

## Object types and flags (`dispatchkit.objects`)

`ObjectType` is an `IntEnum` of object type tags. It has two helper methods:

- `meta()` returns the meta-type: continuation, queue, source or semaphore.
- `is_attribute()` tells whether the tag names an attribute structure.

The module also defines:

- `ContinuationFlag`, with members `ASYNC`, `BARRIER` and `GROUP`;
- `QueueWidth`, with members `ACTIVE_CPUS`, `MAX_PHYSICAL_CPUS` and `MAX_LOGICAL_CPUS`;
- constants such as `API_VERSION`, `CACHELINE_SIZE` and `QUEUE_OVERCOMMIT`.

`round_up_to_cacheline(size)` and `round_up_to_vector_size(size)` round a non-negative size up to a multiple of 64 and 16.

## Queue widths (`dispatchkit.hardware`)

```python
from dispatchkit.hardware import HardwareConfig, resolve_queue_width
from dispatchkit.objects import QueueWidth

hw = HardwareConfig.detect()
resolve_queue_width(QueueWidth.ACTIVE_CPUS, hw)  # active processor count
resolve_queue_width(0, hw)                       # promoted to 1
resolve_queue_width(-42, hw)                     # unknown negative: logical count
```

`HardwareConfig.detect()` gathers three counts:

- the logical count, from `os.cpu_count()`;
- the active count, from `os.sched_getaffinity()` where it exists;
- the physical core count, from `/proc/cpuinfo` where it can be read, otherwise the logical count.

Positive widths are returned as they are. If `hw` is omitted, `detect()` is called.

## Sources (`dispatchkit.sources`)

This module provides the flag sets `VfsFlag`, `ProcFlag` and `MachSendFlag`, and the constant `SOURCE_CANCELED`.

`TimerSource(start, interval=0, leeway=0, flags=0, target=0)` holds a timer schedule. `next_fire(now)` returns the first scheduled time at or after `now`. It returns `None` in two cases:

- a one-shot timer (`interval == 0`) whose time has passed;
- a next fire time that would exceed 64 bits.

## What this package does not do

The package computes values. It has no runtime that executes work. There are no:

- queues;
- groups or semaphores;
- event sources that watch files, processes or signals;
- timers that actually fire.

It also has no command-line program.