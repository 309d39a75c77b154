from typing import Optional


class BioToolsError(Exception):
    """Base class for errors raised by the sequence toolkit."""


class EmptyInputError(BioToolsError):
    pass


class InputTooLargeError(BioToolsError):
    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"Input of {length:,} characters exceeds the {limit:,} character limit")


class UnsupportedOperationError(BioToolsError, ValueError):
    def __init__(self, operation: object, supported: Optional[list[str]] = None):
        self.operation = operation
        self.supported = supported or []
        message = f"Unsupported operation: {operation}"
        if self.supported:
            message += f" (expected one of: {', '.join(self.supported)})"
        super().__init__(message)


class SequenceValidationError(BioToolsError):
    def __init__(self, operation_name: str, required_alphabet: str):
        self.operation_name = operation_name
        self.required_alphabet = required_alphabet
        super().__init__(f"Sequence is not valid {required_alphabet} for {operation_name}")
