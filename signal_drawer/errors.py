from __future__ import annotations


class SignalDrawerError(RuntimeError):
    """Base error raised by signal_drawer."""


class SignalDataError(SignalDrawerError, ValueError):
    """Plot input data violates a precondition (empty, misaligned, non-numeric)."""
