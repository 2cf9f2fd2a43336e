"""Request state enum for batch processing."""

from enum import Enum


class RequestState(Enum):
    """Batch request processing states."""

    RECEIVED = "received"  # Accepted, nothing checked yet
    VALIDATING = "validating"  # Checking batch shape
    READING = "reading"  # Reading items from the controller
    WRITING = "writing"  # Writing items to the controller
    COMPLETED = "completed"  # Every item processed
    FAILED = "failed"  # Rejected or aborted at the first failing item
