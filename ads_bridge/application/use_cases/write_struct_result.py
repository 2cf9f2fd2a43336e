"""Write Struct Result DTO.

Data Transfer Object representing the result of a struct write.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class WriteStructResult:
    """Result of struct write operation.

    Attributes:
        success: Whether write was successful
        struct_name: Variable name of the struct
        size: Bytes written (0 if encoding failed)
        error: Error message if failed
        error_kind: Error category if failed
    """

    success: bool
    struct_name: str
    size: int = 0
    error: str = ""
    error_kind: Optional[str] = None
