from __future__ import annotations

import logging

from .catching import catching, catching_async
from .errors import FailurePropagated
from .nothing import Nothing, nothing
from .result import Result, failure, success

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FailurePropagated",
    "Nothing",
    "Result",
    "catching",
    "catching_async",
    "failure",
    "nothing",
    "success",
]
