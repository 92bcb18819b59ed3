# seqwrap

Sequence numbers in a TCP stream are 32 bits wide and wrap around, and each
direction of a connection starts from its own initial sequence number (ISN).
Inside an implementation it is easier to count bytes with a 64-bit *absolute*
sequence number that starts at zero and never wraps. `seqwrap` converts
between the two.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

Everything lives in the module `seqwrap.wrapping`.

```python
from seqwrap.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

# absolute -> relative
seqno = wrap(3, isn)
print(seqno)                   # 1

# relative -> absolute, choosing the value nearest a recent checkpoint
print(unwrap(seqno, isn, 0))   # 3
```

### `WrappingInt32`

An immutable, hashable 32-bit value expressed relative to an ISN. Its raw
value is in `raw_value`; two instances compare equal when their raw values
are equal. Constructing one with a raw value outside `0 .. 2**32 - 1` raises
`ValueError`.

- `a + n` with an integer `n` steps `n` places past `a`, wrapping modulo 2**32.
- `a - n` with an integer `n` steps `n` places before `a`, wrapping likewise.
- `a - b` with another `WrappingInt32` gives the signed 32-bit offset of `a`
  relative to `b`: the number of increments needed to get from `b` to `a`,
  negative when the number of decrements needed is less than or equal to
  the number of increments.
- `str(a)` is the raw value in decimal.

### `wrap(n, isn)`

Turns a 64-bit absolute sequence number `n` into a `WrappingInt32` relative
to `isn`. Raises `ValueError` if `n` does not fit in an unsigned 64-bit
integer.

### `unwrap(n, isn, checkpoint)`

Turns a `WrappingInt32` back into the 64-bit absolute sequence number that
wraps to `n` and lies closest to `checkpoint`, which is usually the most
recent absolute sequence number seen. Results never fall below zero or above
2**64 - 1. Raises `ValueError` if `checkpoint` does not fit in an unsigned
64-bit integer.

## What it does not do

`seqwrap` is only the sequence-number arithmetic. It has no TCP sender,
receiver, segment parsing or network interface, and it does not open
sockets or send anything.