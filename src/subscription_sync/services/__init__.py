from .orchestrator import run_sync, synchronize

__all__ = [
    "run_sync",
    "synchronize",
]
