class QOIError(ValueError):
    """Base class for everything that can go wrong while decoding a QOI stream."""


class UnexpectedEndOfInput(QOIError):
    """The stream ran out before a header field, tag or payload was complete."""


class InvalidFormat(QOIError):
    """Bad magic bytes, channel count or colorspace value."""


class AllocationFailure(QOIError):
    """The output pixel buffer could not be sized."""
