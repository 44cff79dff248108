"""Custom exceptions for planegeo."""

from typing import Optional


class GeometryError(Exception):
    """Root of every error raised by planegeo.

    Subclasses fix ``error_code``; ``str()`` shows it in front of the
    message, e.g. ``[ARITY_MISMATCH] Expected 4 floats ...``.

    Attributes:
        message: Description without the code prefix
        error_code: Identifier of the error family, None for the base class
    """

    error_code: Optional[str] = None

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ArityError(GeometryError):
    """Wrong number of numeric components supplied to a decoder.

    Attributes:
        expected: Required count (or the required multiple when ``multiple``)
        actual: Count actually received
        multiple: True if any positive multiple of ``expected`` was acceptable
    """

    error_code = "ARITY_MISMATCH"

    def __init__(
        self,
        message: str,
        expected: int,
        actual: int,
        multiple: bool = False
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.multiple = multiple


class TypeMismatchError(GeometryError):
    """Decoder or encoder given a value of the wrong shape.

    Attributes:
        observed: Name of the type that was actually received
    """

    error_code = "TYPE_MISMATCH"

    def __init__(self, message: str, observed: Optional[str] = None):
        super().__init__(message)
        self.observed = observed


class EncodingNotImplementedError(GeometryError):
    """Encoding requested for a type that has none (paths, polygons)."""

    error_code = "NOT_IMPLEMENTED"

    def __init__(self, message: str, type_name: Optional[str] = None):
        super().__init__(message)
        self.type_name = type_name


class DecodeError(GeometryError):
    """Input text is not well-formed for the requested type.

    Attributes:
        text: The offending input (if applicable)
    """

    error_code = "DECODE_ERROR"

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text


class ConfigurationError(GeometryError):
    """Error in encoding options.

    Attributes:
        config_key: The configuration key that caused the error (if applicable)
    """

    error_code = "CONFIG_ERROR"

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
