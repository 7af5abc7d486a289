"""Numeric target types backed by numpy scalar types."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

import numpy as np

__all__ = ["NumericTarget", "NumericType", "resolve_numeric_type"]

NumericTarget = Union[str, type, np.dtype]

_DOUBLE_MAX = float(np.finfo(np.float64).max)


@dataclass(frozen=True)
class NumericType:
    """Representable range and kind of a fixed-width numeric target."""

    dtype: np.dtype
    minimum: Union[int, float]
    maximum: Union[int, float]

    @property
    def name(self) -> str:
        return self.dtype.name

    @property
    def is_integer(self) -> bool:
        return self.dtype.kind in "iu"

    @property
    def is_unsigned(self) -> bool:
        return self.dtype.kind == "u"

    @property
    def mantissa_bits(self) -> int:
        """Stored mantissa bits of a floating target (0 for integers)."""

        return 0 if self.is_integer else int(np.finfo(self.dtype).nmant)

    def contains(self, value: Union[int, float]) -> bool:
        return self.minimum <= value <= self.maximum

    def cast(self, value: Union[int, float]) -> Any:
        """Convert an in-range Python number into the target scalar type."""

        return self.dtype.type(value)


def resolve_numeric_type(target: NumericTarget) -> NumericType:
    """Return the :class:`NumericType` for ``target`` (``"int32"``, ``np.float32``...)."""

    if isinstance(target, NumericType):
        return target
    if target is None:
        raise ValueError("A numeric target type is required")
    try:
        dtype = np.dtype(target)
    except TypeError as exc:
        raise ValueError(f"Unknown numeric type: {target!r}") from exc

    if dtype.kind in "iu":
        info = np.iinfo(dtype)
        return NumericType(dtype=dtype, minimum=int(info.min), maximum=int(info.max))
    if dtype.kind == "f":
        finfo = np.finfo(dtype)
        # wider than double targets are still parsed through a Python float
        limit = min(float(finfo.max), _DOUBLE_MAX)
        return NumericType(dtype=dtype, minimum=-limit, maximum=limit)
    raise TypeError(f"Numeric type must be integral or floating, got {dtype.name!r}")
