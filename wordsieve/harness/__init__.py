from .core import run_case, run_batch, SolveState, DEFAULT_MAX_ATTEMPTS
from .io import summarize, write_csv, write_manifest

__all__ = ["run_case", "run_batch", "SolveState", "DEFAULT_MAX_ATTEMPTS",
           "summarize", "write_csv", "write_manifest"]
