from .normalize import normalize_times, normalize_values

__all__ = ["normalize_times", "normalize_values"]
