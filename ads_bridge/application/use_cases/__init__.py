"""Use cases for the ADS variable bridge.

Each use case has a single public entry point, takes its collaborators by
injection and reports results through data structures.
"""

from .process_batch_use_case import ProcessBatchUseCase
from .write_struct_result import WriteStructResult
from .write_struct_use_case import WriteStructUseCase

__all__ = [
    "ProcessBatchUseCase",
    "WriteStructResult",
    "WriteStructUseCase",
]
