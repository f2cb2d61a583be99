"""
Exception classes for projterm command processing.

Parsing and security checks report user mistakes as data on their result
objects. The exceptions here cover programming errors only: calling the
parser with something that is not a string, or building a command registry
that cannot be matched unambiguously.
"""


class ProjTermError(Exception):
    """Base exception for all projterm errors."""

    pass


class CommandInputTypeError(ProjTermError, TypeError):
    """Raised when a command entry point receives a non-string input."""

    def __init__(self, operation: str, value: object):
        """
        Initialize the exception.

        Params:
            operation: Name of the entry point that rejected the value
            value: The offending input
        """
        self.operation = operation
        self.value_type = type(value).__name__
        super().__init__(
            f"{operation}() expects a str command, got {self.value_type}"
        )


class RegistryError(ProjTermError):
    """Raised when a command registry cannot be built from its specs."""

    def __init__(self, phrase: str, reason: str):
        """
        Initialize the exception.

        Params:
            phrase: The command phrase that was rejected
            reason: Why the phrase cannot be registered
        """
        self.phrase = phrase
        self.reason = reason
        super().__init__(f"Invalid command phrase '{phrase}': {reason}")


class UnknownCommandTypeError(ProjTermError, KeyError):
    """Raised when a registry has no spec for the requested command type."""

    def __init__(self, command_type: str):
        """
        Initialize the exception.

        Params:
            command_type: Value of the command type that has no spec
        """
        self.command_type = command_type
        super().__init__(f"No command registered for type '{command_type}'")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
