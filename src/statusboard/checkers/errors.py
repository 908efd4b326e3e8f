"""Errors reported by status checkers."""

from __future__ import annotations


class CheckError(Exception):
    """Base class for every failure a checker can report."""


class TransportError(CheckError):
    """The checked endpoint could not be reached."""


class UnexpectedStatusCodeError(CheckError):
    """The endpoint answered with a non-2xx status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected HTTP status code: {status_code}")
        self.status_code = status_code


class InvalidCheckerConfigError(CheckError):
    """The checker is misconfigured; no check was attempted."""


class EmptyHostError(InvalidCheckerConfigError):
    def __init__(self) -> None:
        super().__init__("Host address is empty")


class EmptyProcessNameError(InvalidCheckerConfigError):
    def __init__(self) -> None:
        super().__init__("Process name must not be empty")


class ProcessNotRunningError(CheckError):
    """The process listing ran but the target process was not found."""

    def __init__(self, process_name: str, detail: str = "") -> None:
        message = f"Process '{process_name}' is not running"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.process_name = process_name


class CheckTimeoutError(CheckError, TimeoutError):
    """The check did not finish within its allotted time."""
