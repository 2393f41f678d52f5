"""Timeflake errors, tagged with the operation that failed."""

from utils.timestamp import format_timestamp


class BaseTimeflakeError(Exception):
    """Base error carrying the failing operation and a timestamp for tracking."""

    def __init__(self, message, op=None, context=None, cause=None):
        super().__init__(message)
        self.op = op or "timeflake"
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"{self.op}: {super().__str__()}"

    def to_dict(self):
        return {"type": type(self).__name__, "op": self.op, "error": super().__str__()}


class OutOfBoundsError(BaseTimeflakeError):
    """Byte length or component value outside the 128-bit layout."""

    def __init__(self, message, value=None, limit=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        if limit is not None:
            context["limit"] = limit
        super().__init__(message, context=context, **kwargs)


class ConversionError(BaseTimeflakeError):
    """String <-> integer conversion failures (bad symbol, width overflow)."""

    def __init__(self, message, alphabet=None, **kwargs):
        context = kwargs.pop("context", {})
        if alphabet:
            context["alphabet"] = alphabet
        super().__init__(message, context=context, **kwargs)


class UUIDError(BaseTimeflakeError):
    """UUID text formatting or parsing failures."""


class RandomSourceError(BaseTimeflakeError):
    """The secure random source could not supply bytes. Safe to retry."""

    def __init__(self, message, requested=None, **kwargs):
        context = kwargs.pop("context", {})
        if requested is not None:
            context["requested"] = requested
        super().__init__(message, context=context, **kwargs)


# Aliases matching the error kinds' descriptive names
BoundsError = OutOfBoundsError
IdentityFormatError = UUIDError
