"""Exception hierarchy for barcoder."""


class BarcoderError(Exception):
    """Base exception for all barcoder errors."""

    pass


class MissingArgumentError(BarcoderError, ValueError):
    """A required constructor argument was None or empty."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} must be provided")


class ModuleError(BarcoderError, ValueError):
    """Illegal bar/space width sequence."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class BarcodeError(BarcoderError):
    """Errors raised while constructing a barcode from its input data."""

    pass


class InvalidDataError(BarcodeError):
    """Input data violates the length or format rules of a symbology."""

    def __init__(self, data: str, reason: str) -> None:
        self.data = data
        self.reason = reason
        super().__init__(f"Invalid barcode data '{data}': {reason}")


class IllegalCharacterError(InvalidDataError):
    """Input data holds a character the symbology cannot encode."""

    def __init__(self, data: str, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(data, f"illegal character {character!r} at position {position}")


class UnknownSymbologyError(BarcodeError):
    """Requested symbology is not supported."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown symbology '{name}'")


class OutputError(BarcoderError):
    """Errors raised by a drawing backend."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Output failed: {reason}")


class OutputWriteError(OutputError):
    """Drawing backend could not write its result."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"could not write '{path}': {reason}")
