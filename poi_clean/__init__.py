from .pipeline import clean_csv, CleanError, InputOpenError, OutputOpenError, NoUsableRowsError
from .config import CleanOptions

__all__ = [
    "clean_csv",
    "CleanOptions",
    "CleanError",
    "InputOpenError",
    "OutputOpenError",
    "NoUsableRowsError",
]
