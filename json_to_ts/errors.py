"""
Errors raised at the text boundary of the generator.

The inference core never raises over a decoded JSON value; these are
raised by :func:`json_to_ts.converter.convert_text`.
"""


class JsonToTsError(Exception):
    """Base class for errors reported to the user."""

    pass


class InvalidJsonError(JsonToTsError):
    """Raised when the input text is not valid JSON.

    The message carries the underlying parser message, e.g.
    ``Invalid JSON: Expecting value: line 1 column 1 (char 0)``.
    """

    pass


class ConversionError(JsonToTsError):
    """Raised when type generation fails unexpectedly.

    The original exception is available as ``__cause__``.
    """

    pass
