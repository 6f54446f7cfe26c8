"""Error codes of the vector index and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum
from typing import Union


class ErrorCode(IntEnum):
    """Status codes returned by index operations."""

    SUCCESS = 0
    INVALID_INIT = 1
    INVALID_INDEX = 2
    INVALID_VECTOR = 3
    INVALID_RESULT = 4
    INVALID_DIMENSIONS = 5
    INVALID_ARGUMENT = 6
    INVALID_ID = 7
    INVALID_REF = 8
    DUPLICATED_ENTRY = 9
    NOT_FOUND_ID = 10
    INDEX_EMPTY = 11
    THREAD_ERROR = 12
    SYSTEM_ERROR = 13
    NOT_IMPLEMENTED = 14

    def message(self) -> str:
        """Human-readable description of the code."""
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.SUCCESS: "Success",
    ErrorCode.INVALID_INIT: "Invalid initialization",
    ErrorCode.INVALID_INDEX: "Invalid index",
    ErrorCode.INVALID_VECTOR: "Invalid vector",
    ErrorCode.INVALID_RESULT: "Invalid result",
    ErrorCode.INVALID_DIMENSIONS: "Invalid dimensions",
    ErrorCode.INVALID_ARGUMENT: "Invalid argument",
    ErrorCode.INVALID_ID: "Invalid ID",
    ErrorCode.INVALID_REF: "Invalid reference",
    ErrorCode.DUPLICATED_ENTRY: "Duplicated entry",
    ErrorCode.NOT_FOUND_ID: "ID not found",
    ErrorCode.INDEX_EMPTY: "Index is empty",
    ErrorCode.THREAD_ERROR: "Thread error",
    ErrorCode.SYSTEM_ERROR: "System error",
    ErrorCode.NOT_IMPLEMENTED: "Not implemented",
}


class VictorError(Exception):
    """An index operation failed with a non-success code."""

    def __init__(self, code: Union[ErrorCode, int]) -> None:
        try:
            self.code: Union[ErrorCode, int] = ErrorCode(code)
        except ValueError:
            self.code = int(code)
            text = f"unknown error code: {self.code}"
        else:
            text = self.code.message()
        super().__init__(text)


def raise_for_code(code: Union[ErrorCode, int]) -> None:
    """Raise :class:`VictorError` unless ``code`` means success."""
    if code != ErrorCode.SUCCESS:
        raise VictorError(code)