from __future__ import annotations


class KodakError(Exception):
    """Base class for errors raised by kodak."""


class OutOfBoundsError(KodakError, IndexError):
    """A location or region corner falls outside the addressed image."""


class MalformedInputError(KodakError, ValueError):
    """A fixed-arity conversion got the wrong number of elements."""


class CodecError(KodakError, ValueError):
    """PNG data could not be decoded."""


class PreconditionViolation(KodakError, AssertionError):
    """An internal primitive was called with unvalidated arguments."""
