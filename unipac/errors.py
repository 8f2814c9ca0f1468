"""
Errors raised while parsing arguments or handling a user choice.

Each error carries the exit code the process should end with.
"""


class UnipacError(Exception):
    """Base class for errors reported to the user by the CLI."""

    exit_code = 1
    show_usage = False

    def __init__(self, message: str = ''):
        super().__init__(message)
        self.message = message


class UsageError(UnipacError):
    """The argument vector could not be turned into an invocation."""

    show_usage = True


class UnknownFlagError(UsageError):
    """A flag-like token is not in the flag table."""

    def __init__(self, flag: str):
        super().__init__(f"Unknown option '{flag}'")
        self.flag = flag


class MissingArgumentError(UsageError):
    """No operation or search term was given."""


class MissingPackageNameError(UsageError):
    """A flag that needs a package name was given without one. Not fatal."""

    exit_code = 0
    show_usage = False

    def __init__(self, flag: str):
        super().__init__(f"Option '{flag}' needs a package name")
        self.flag = flag


class UnknownSourceError(UnipacError):
    """The interactive prompt got an answer outside the accepted set."""

    def __init__(self, choice: str):
        super().__init__(f"Unknown source '{choice}'")
        self.choice = choice
