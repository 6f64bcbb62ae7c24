"""Kernel value types — public re-export surface.

Modules:
  option.py — Some, Nothing, Option, option_of
  result.py — Ok, Err, Result
"""

from apns_payload.kernel.types.option import Nothing, Option, Some, option_of
from apns_payload.kernel.types.result import Err, Ok, Result

__all__ = [
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "option_of",
]
