"""Computer club event log processing: seating, queueing, revenue and usage."""

__version__ = "0.1.0"
__all__ = ["bimap", "processor", "cli"]