"""
pnb/errors.py

Error taxonomy for the personal notebook.

Every failure the store or the dispatcher can surface is a subclass of
NotebookError, so the CLI layer can catch them uniformly and turn them into
a message and an exit code. The store performs exactly two classifications:

    • a uniqueness violation  → NameAlreadyTaken
    • no row affected/returned → NotFound

Anything else coming out of the backend is wrapped in StorageFailure and
chained to the original exception.
"""


class NotebookError(Exception):
    """Base class for all notebook errors."""


class NameAlreadyTaken(NotebookError):
    """A create or rename targeted a notename that already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"The notename `{name}` is already taken; try use another notename")


class NotFound(NotebookError):
    """No note with the requested notename exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No note named `{name}` in the notebook")


class StorageFailure(NotebookError):
    """Any backend or connectivity error that is not classified further."""


class InputFailure(NotebookError):
    """Reading a line of the interactive note failed."""


class ConfigError(NotebookError):
    """Required configuration is missing from the environment."""
