# No dependencies
from enum import Enum
import numpy as np


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"


channel_maxima = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
}

default_format_dtypes = {
    FormatType.INT: np.uint8,
    FormatType.FLOAT: np.float32,
}


def as_format_type(value) -> FormatType:
    """Accept a FormatType or its string value ("int" / "float")."""
    if isinstance(value, FormatType):
        return value
    try:
        return FormatType(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown format type: {value!r}") from None
