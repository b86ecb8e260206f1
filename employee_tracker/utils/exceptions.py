class TrackerError(Exception):
    """Base class for errors shown to the user instead of crashing the menu."""

    title = "Error"

    def __init__(self, message=None):
        super().__init__(message or self.title)
        self.message = message or self.title


class ValidationError(TrackerError, ValueError):
    title = "Invalid Input"


class EmptyInput(ValidationError):
    title = "Empty Input"

    def __init__(self, message="Please enter a value."):
        super().__init__(message)


class InvalidNumber(ValidationError):
    title = "Invalid Number"

    def __init__(self, message="Please enter a non-negative number."):
        super().__init__(message)


class InvalidManagerSelection(TrackerError):
    title = "Invalid Manager Selection"

    def __init__(self, message="An employee cannot be their own manager."):
        super().__init__(message)


class DatabaseError(TrackerError):
    """Wraps any connection or query failure; `orig` keeps the driver error."""

    title = "Database Error"

    def __init__(self, message, orig=None, title=None):
        super().__init__(message)
        self.orig = orig
        if title:
            self.title = title


class PromptExhausted(EOFError):
    """Raised by a scripted prompter once its canned answers run out."""
