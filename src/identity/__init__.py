"""BitAuth System Identification Number (SIN) records."""

from .exceptions import IdentityError, InvalidArgumentError
from .record import SinRecord

__all__ = ["SinRecord", "IdentityError", "InvalidArgumentError"]
