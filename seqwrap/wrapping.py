"""32-bit wrapping sequence numbers and their 64-bit absolute counterparts."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["WrappingInt32", "wrap", "unwrap"]

_MOD32 = 1 << 32
_MASK32 = _MOD32 - 1
_MOD64 = 1 << 64


def _to_int32(value: int) -> int:
    """Reinterpret the low 32 bits of ``value`` as a signed 32-bit integer."""
    value &= _MASK32
    return value - _MOD32 if value >= 1 << 31 else value


def _check_uint64(name: str, value: int) -> None:
    if not 0 <= value < _MOD64:
        raise ValueError(f"{name} must fit in an unsigned 64-bit integer, got {value}")


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer expressed relative to an initial sequence number.

    Used for TCP sequence numbers and acknowledgment numbers.
    """

    raw_value: int

    def __post_init__(self) -> None:
        if not 0 <= self.raw_value <= _MASK32:
            raise ValueError(f"raw value must fit in 32 bits, got {self.raw_value}")

    def __add__(self, other: int) -> WrappingInt32:
        """Step ``other`` positions past this point, wrapping at 2**32."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value + other) & _MASK32)

    def __sub__(self, other):
        """Difference to another WrappingInt32 (signed 32-bit), or step back by an int."""
        if isinstance(other, WrappingInt32):
            return _to_int32(self.raw_value - other.raw_value)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value - other) & _MASK32)

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn the absolute 64-bit sequence number ``n`` into a relative one."""
    _check_uint64("n", n)
    return isn + n


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to ``n`` closest to ``checkpoint``."""
    _check_uint64("checkpoint", checkpoint)
    checkpoint_32 = wrap(checkpoint, isn).raw_value
    offset = _to_int32(n.raw_value - checkpoint_32)
    result = checkpoint + offset
    if result < 0:
        return result + _MOD32
    if result >= _MOD64:
        return result - _MOD32
    return result