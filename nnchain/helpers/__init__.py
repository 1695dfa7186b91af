from .Backend import Backend, backend
from .logger import RunLogger
from .stats import layer_stats

__all__ = [
    "Backend",
    "backend",
    "RunLogger",
    "layer_stats",
]
