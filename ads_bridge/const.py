"""Constants for the ADS variable bridge.

This file contains only the fixed values of the controller wire format and
the request contract. Runtime settings live in the YAML configuration.
"""

from __future__ import annotations

# Request directions
REQUEST_READ = "read"
REQUEST_WRITE = "write"
REQUEST_TYPES = (REQUEST_READ, REQUEST_WRITE)

# Byte order of the ADS wire format
BYTE_ORDER = "<"

# String layout
DEFAULT_STRING_WIDTH = 81  # 80 characters + terminator
STRUCT_STRING_SLOT = 81  # Fixed stride for string fields inside structs
DEFAULT_STRING_ENCODING = "cp1252"  # ANSI code page used by the controller

# Epoch used by DATE values (seconds since 1970-01-01)
PLC_DATE_EPOCH_YEAR = 1970

# Scalar widths in bytes
SCALAR_WIDTHS = {
    "bool": 1,
    "byte": 1,
    "sint": 2,
    "usint": 2,
    "int": 4,
    "uint": 4,
    "dint": 8,
    "udint": 8,
    "real": 4,
    "lreal": 8,
    "time": 4,
    "date": 4,
}

# Error kinds reported in responses
ERROR_KIND_VALIDATION = "validation"
ERROR_KIND_TYPE = "type"
ERROR_KIND_LENGTH = "length_mismatch"
ERROR_KIND_TRANSPORT = "transport"
ERROR_KIND_INTERNAL = "internal"

INVALID_REQUEST_MESSAGE = (
    "Invalid request! Length of names and types must be equal and larger "
    "than zero. Request type must be either 'read' or 'write'. If "
    "request_type is 'write' values must be supplied."
)

ITEM_ERROR_TEMPLATE = (
    "Error at variable: '{name}'. --- Error Message: {cause}. --- "
    "Please refer to the ads_bridge log for more info."
)

# Configuration defaults
CONFIG_VERSION_PREFIX = "1."
DEFAULT_EVENT_LOGGER = "ads_bridge.events"
DEFAULT_VERBOSITY = "important"

CORRELATION_TAG_LENGTH = 12
