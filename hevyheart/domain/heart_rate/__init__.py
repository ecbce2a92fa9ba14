from .sync import summarize_heart_rate, synchronize_heart_rate, to_epoch_ms

__all__ = [
    "synchronize_heart_rate",
    "summarize_heart_rate",
    "to_epoch_ms",
]
