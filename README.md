# parallel

A small library for running independent functions at the same time on
threads and gathering their return values.

Work is organised in three layers:

- **`Executor`** (`parallel.executor`): one function call with its
  arguments. Attach `Result` slots with `set_res(...)`; `do()` runs the call
  and writes its return values into the slots' `value` attribute.
- **`TaskQueue`** (`parallel.taskqueue`): a list of executors, run one after
  another by `purge()`. `push(f, *args)` appends a call and returns its
  executor.
- **`Parallel`** (`parallel.parallel`): a group of queues run concurrently,
  each queue on its own thread. `add(f, *args)` puts a call in a queue of its
  own; `queue()` gives you a new queue to fill by hand; `give_birth()` creates
  a child group. `wait(*args)` first waits for all children (which run
  concurrently with one another), then runs this group's queues and blocks
  until they finish. Each `wait` prints `child wait finished` once its
  children are done.

## Result slots

How a call's return value is stored depends on how many slots were given:

- no slots: the call must return `None`;
- one slot: the whole return value goes into it;
- several slots: the call must return a tuple of exactly that length, and
  its items are stored in order.

## Errors

Wiring mistakes raise a subclass of `parallel.errors.ParallelError`, and
`wait()` raises them again rather than handing them to the handler:

- `NotAFunctionError`: the target is not callable;
- `ArgInputLengthNotMatchError`: the arguments do not fit the function's
  parameters (checked for plain functions and bound methods);
- `ResOutOfRangeError`: the return value does not fit the result slots;
- `ResTypeNotASlotError`: a result target is not a `Result`;
- `ResNilError`: a result target is `None`.

Any other exception raised by a task does not bring the group down: it stops
the rest of that task's queue and is passed to the group's exception handler.
The default handler (`parallel.exception.DefaultException`) prints it.
Install your own with `with_exception(...)`; child groups made afterwards
inherit it.

## Installation

```
pip install .
```

## Usage

```python
from parallel.parallel import Parallel
from parallel.executor import Result

text, number = Result(), Result()
square = Result()

p = Parallel()
p.add(lambda s: (s, len(s)), "hello").set_res(text, number)
p.add(lambda x: x * x, 12).set_res(square)
p.wait()

print(text.value, number.value)  # hello 5
print(square.value)              # 144
```

### Sequential steps inside one branch

```python
q = p.queue()
q.push(step_one).set_res(first)
q.push(step_two).set_res(second)   # runs after step_one
```

### Dependent stages with child groups

```python
p = Parallel()
p.give_birth().add(load_a, ctx, 1).set_res(a)
p.give_birth().add(load_b, ctx, 2).set_res(b)
# runs once both children are done; read the slots inside the call
p.add(lambda: combine(a.value, b.value)).set_res(out)
p.wait()
```

### Custom exception handling

```python
from parallel.exception import ExceptionProxy

class Collect(ExceptionProxy):
    def __init__(self):
        self.seen = []

    def deal(self, *args):
        return lambda err: self.seen.append((err, args))

p = Parallel().with_exception(Collect())
```

The arguments given to `wait(*args)` are passed on to `deal(*args)`.

## Demo

`parallel.examples` holds sample tasks that sleep for a few seconds each, and
`parallel.demo` runs scenarios with them: `basic`, `child`, `exception`,
`multique` and `que`. Run one, or all of them (the default):

```
parallel-demo
parallel-demo que
```

Each scenario prints its results and the time it took.

## Limits

Tasks run on threads, not processes. There is no cap on how many queues run
at once, and no timeouts or cancellation: `wait()` blocks until every task
has returned or failed.

## Tests

```
pip install ".[test]"
pytest
```