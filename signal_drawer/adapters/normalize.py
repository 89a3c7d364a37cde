from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta
from typing import Any

import numpy as np
import torch

from signal_drawer.errors import SignalDataError


def normalize_values(value: Any, *, label: str = "values") -> np.ndarray:
    """Coerce a 1-D list, numpy array or torch tensor to a non-empty float64 array."""
    arr = _coerce_1d_numeric(value, label=label)
    if arr.size == 0:
        raise SignalDataError(f"{label} must not be empty")
    if not np.all(np.isfinite(arr)):
        raise SignalDataError(f"{label} contains non-finite values")
    return arr


def normalize_times(value: Any, *, label: str = "times") -> np.ndarray:
    """Coerce times to a non-empty int64 array of nanoseconds.

    Accepts integer nanoseconds, `datetime.timedelta` items and numpy
    timedelta64 arrays.
    """
    if isinstance(value, np.ndarray) and value.dtype.kind == "m":
        arr = value.astype("timedelta64[ns]").astype(np.int64)
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)) and value and all(
        isinstance(item, timedelta) for item in value
    ):
        arr = np.asarray([_timedelta_ns(item) for item in value], dtype=np.int64)
    else:
        arr = np.rint(_coerce_1d_numeric(value, label=label)).astype(np.int64)
    if arr.ndim != 1:
        raise SignalDataError(f"{label} must be 1-D")
    if arr.size == 0:
        raise SignalDataError(f"{label} must not be empty")
    return arr


def _timedelta_ns(value: timedelta) -> int:
    return (value.days * 86_400 + value.seconds) * 1_000_000_000 + value.microseconds * 1_000


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise SignalDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        if tensor.is_complex():
            raise SignalDataError(f"{label} must be real-valued; take the magnitude first")
        return tensor.to(torch.float64).numpy()

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise SignalDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
        if arr.ndim != 1:
            raise SignalDataError(f"{label} must be 1-D")
        return _coerce_ndarray(arr, label=label)

    raise SignalDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)
    if arr.dtype.kind == "c":
        raise SignalDataError(f"{label} must be real-valued; take the magnitude first")

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise SignalDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
