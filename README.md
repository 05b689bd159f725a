# hpclab

A collection of small, self-contained pieces of systems and algorithms
work:

- **Algorithms** (`hpclab.lru`, `hpclab.shortest_path`, `hpclab.linked`,
  `hpclab.matrix_ops`, `hpclab.sorting`, `hpclab.parentheses`): an LRU
  cache, Dijkstra shortest distance, linked-list and tree helpers,
  anti-diagonal traversal and in-place transposition, selection and
  sorting, and parentheses checks.
- **Parallel experiments** (`hpclab.fibonacci`, `hpclab.reduce`,
  `hpclab.unbound_loop`, `hpclab.benchmark`, `hpclab.timer`): Fibonacci,
  a series reduction with several work-splitting strategies and a loop
  over a list of nodes, each run serially and with thread pools and
  timed against each other.
- **Resource management** (`hpclab.memory_buffer`, `hpclab.object_pool`):
  a growable buffer with an inline capacity that grows by half again,
  and a fixed-size object pool guarded by a spin lock.
- **Expression templates** (`hpclab.expression`): lazy element-wise
  vector expressions.
- **Inter-process communication** (`hpclab.ipc`): files exchanged under
  advisory locks, anonymous pipes and named pipes, and POSIX shared
  memory.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from hpclab.lru import LRUCache
from hpclab.parentheses import is_valid_parentheses, longest_valid_parentheses
from hpclab.fibonacci import fib, parallel_fib
from hpclab.sorting import nth_smallest, heap_sort, radix_sort
from hpclab.shortest_path import shortest_distance
from hpclab.reduce import Strategy, reduce_serial, reduce_with

cache = LRUCache(2)
cache.put(1, 10)
cache.put(2, 20)
cache.get(1)          # 10; a missing key raises KeyError

is_valid_parentheses("()[]")      # True
longest_valid_parentheses("(()")  # 2
fib(10)                           # 55
parallel_fib(10)                  # 55

nth_smallest([5, 1, 4], 2)        # 4
values = [3, 1, 2]
heap_sort(values)                 # values is now [1, 2, 3]

shortest_distance(2, [(0, 1, 1), (1, 2, 2), (0, 2, 5)])  # 3

reduce_serial(50)                      # 39200
reduce_with(Strategy.GRAIN_SIZE, 50)   # 39200
```

Lazy expressions are evaluated only when assigned into a matrix:

```python
from hpclab.expression import Matrix

a = Matrix(4, [0, 1, 2, 3])
b = Matrix(4, [0, 1, 2, 3])
c = Matrix(4, [2, 3, 4, 5])
d = Matrix(4)
d.assign(a + b - c)
list(d)               # [-2, -1, 0, 1]
```

Objects are borrowed from a pool for the length of a `with` block:

```python
from hpclab.object_pool import ObjectPool

pool = ObjectPool(dict, 4)
with pool.acquire() as item:
    pool.size()       # 3 free while one is lent out
pool.size()           # 4
```

## Commands

Algorithm and resource-management demos:

```
hpclab-linked        # prints a reversed list of the given ints, or of 0..4
hpclab-transpose     # transposes a rows x cols matrix (default 4 4)
hpclab-parentheses   # runs both checks on the given text
hpclab-buffer
hpclab-pool
hpclab-expression
```

Benchmark of parallel against serial runs:

```
hpclab-benchmark --fib 30 --loop 100 --reduce 5000000
```

Inter-process communication. Each pair is run in two terminals, with
the first command started before the second:

```
hpclab-file-producer [text] [file]
hpclab-file-consumer [file]

hpclab-fifo-writer [path] [loops]
hpclab-fifo-reader [path]

hpclab-shm-writer [name] [messages...]
hpclab-shm-reader [name]
```

Single-process demo, echoing text through an anonymous pipe:

```
hpclab-pipe [text]
```

The IPC commands use POSIX facilities (`fcntl` locks, FIFOs, shared
memory) and are meant for Linux and other Unix-like systems.

## What is not included

The package has no TCP server or client, no signal-handling demos, no
CPU-affinity control, no island counting or local-minimum search, and
no matrix-multiplication benchmark.