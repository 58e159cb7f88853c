"""Search algorithms over sorted sequences, small numeric helpers and micro-benchmarks."""

__version__ = "0.1.0"
__all__ = ["benchmarks", "cpplib", "search"]