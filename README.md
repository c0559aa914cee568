# newstdlib

A small toolkit of general-purpose building blocks.

## Modules

- `newstdlib.maths`
  - Integer helpers that take non-negative ints up to 64 unsigned bits:
    - `power_of(n, p)` wraps its result to 64 bits. `power_of(0, 0)` raises `ValueError`.
    - `factorial_of(n)` wraps its result to 64 bits.
    - `int_divide_by(a, b)`.
    - `fast_int_divide_by(a, b)` computes `a * (1 // b)` in integers.
    - `int_multiply_by(a, b)` wraps its result to 64 bits.
  - A negative or oversized argument raises `ValueError`, and a non-int raises `TypeError`.
  - `deg_to_rad(deg)` and `rad_to_deg(rad)` convert angles in single precision, using the constant `PI`.
- `newstdlib.vector3d`: `Vector3d`, a mutable vector of three doubles (`x`, `y`, `z`).
  - `+`, `-` and `/` work component-wise with another vector or with a scalar. So do `+=`, `-=` and `/=`.
  - `*` between two vectors is the cross product, and `*` with a scalar scales each component.
  - `cross(other)` gives the cross product.
  - Unary `+` and `-` are supported.
  - `==` compares with another vector or with a scalar, which is tested against every component.
  - Division by zero follows IEEE rules and gives infinities or NaN.
- `newstdlib.function`: `Function` holds a replaceable callable.
  - `get()` returns it.
  - `play(*args)` or calling the object invokes it. With no callable set, this raises `TypeError`.
  - `replace(fun)` swaps it.
- `newstdlib.text`: `String` is mutable text that may be null.
  - `compare_with` and `compare_n_bytes_with` return -1, 0 or 1.
  - `is_equal_with` and `is_n_byte_equal_with` return booleans.
  - `contains` tests for a substring.
  - `replace` (alias `overwrite`) sets new text, and `join` (alias `append`) adds to the end.
  - Other methods: `erase(index)`, `shuffle`, `swap`, `empty`, `data`, `at`, `first`, `last` and `clear` (alias `destroy`).
  - Operators: comparisons, `+`, `+=`, `*` and `*=`, plus `len()` and indexing.
- `newstdlib.pool`: `Pool` is an ordered collection of objects of any type.
  - Methods: `add`, `acquire(factory, *args, **kwargs)`, `at`, `remove_at`, `release`, `size` and `is_empty`.
  - An out-of-range index raises `IndexError`.
- `newstdlib.mutex`: `Mutex` has `lock`, `unlock`, `try_lock`, `timed_lock(seconds)` and `destroy`.
  - It also has a `locked` property and can be used as a context manager.
- `newstdlib.threads`: `Thread(target, *args, **kwargs)` starts at once.
  - `get()` waits and returns the target's result, or re-raises its exception.
  - `wait()` waits and discards the result.
  - `is_alive()` tells whether the thread is still running.
  - Inside the target, `Thread.finish(value)` ends the thread with `value` as its result.
  - `Thread.send(message_id, value)` and `Thread.receive(message_id, timeout=None)` pass named messages between any threads.
  - A message is removed once received. Sending under an id that is still waiting raises `ValueError`, and a receive that times out raises `TimeoutError`.
- `newstdlib.multithreading`: `ThreadRegistry` starts threads under names.
  - `create(name, target, *args)` starts one. A duplicate name raises `ValueError`.
  - `get_one(name)` and `wait_one(name)` wait on the named thread.
  - `is_exist(name)` and `is_alive(name)` both report whether the name is registered.

## Install

    pip install newstdlib

## Example

    from newstdlib.maths import power_of, factorial_of
    from newstdlib.vector3d import Vector3d
    from newstdlib.threads import Thread

    power_of(2, 10)     # 1024
    factorial_of(5)     # 120

    a = Vector3d(1.0, 0.0, 0.0)
    b = Vector3d(0.0, 1.0, 0.0)
    a * b               # cross product: Vector3d(0.0, 0.0, 1.0)

    def worker(text):
        Thread.send("greeting", text + "!")
        return 42

    t = Thread(worker, "hello")
    Thread.receive("greeting")   # "hello!"
    t.get()                      # 42

## What it does not do

The package has only the double-precision `Vector3d`; there is no single-precision vector type. `Vector3d` offers arithmetic and the cross product. It has no dot product, norm, normalisation, distance or angle methods.

## Tests

    pip install newstdlib[test]
    pytest