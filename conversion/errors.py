"""Errors raised while building or running a conversion command."""

from typing import Union


class ConversionError(Exception):
    """Base class for conversion failures."""

    pass


class InvalidInputError(ConversionError):
    """Raised when the skill path handed to the command builder is empty."""

    pass


class UnresolvedTargetError(ConversionError):
    """Raised when an Auto target reaches the command builder."""

    pass


class UnsupportedTargetError(ConversionError):
    """Raised for a target outside the known platforms."""

    pass


class ExecutionFailedError(ConversionError):
    """The converter process could not be spawned, exited non-zero, or timed out."""

    def __init__(self, cause: Union[BaseException, str], stdout: str = "", stderr: str = ""):
        super().__init__(f"command failed: {cause}\nStderr: {stderr}")
        self.cause = cause
        self.stdout = stdout
        self.stderr = stderr

    @property
    def detail(self) -> str:
        """Best diagnostic text available: stderr, else the cause."""
        return self.stderr.strip() or str(self.cause)
