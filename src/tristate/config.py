"""
Configuration for tristate.
"""

from typing import Final

# --- Exit Codes ---
EXIT_SUCCESS: Final[int] = 0
EXIT_RETRYABLE: Final[int] = 75  # EX_TEMPFAIL from sysexits.h
EXIT_FAILED: Final[int] = 1
MAX_EXIT_CODE: Final[int] = 255

# --- Runtime Type Checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "TRISTATE_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "TRISTATE_BEARTYPE_ALL"

# --- Conversions ---
TRANSIENT_ERRORS: Final[tuple[type[Exception], ...]] = (
    BlockingIOError,
    InterruptedError,
    TimeoutError,
    ConnectionRefusedError,
    ConnectionResetError,
)

# --- UI Configuration ---
RETRYABLE_STYLE: Final[str] = "yellow"
FAILED_STYLE: Final[str] = "red"
CONTEXT_STYLE: Final[str] = "bold"
SECTION_STYLES: Final[dict[str, str]] = {
    "note": "cyan",
    "suggestion": "green",
    "warning": "yellow",
    "section": "white",
    "error": "red",
}

# --- SSoT Enforcement ---
__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "CONTEXT_STYLE",
    "EXIT_FAILED",
    "EXIT_RETRYABLE",
    "EXIT_SUCCESS",
    "FAILED_STYLE",
    "MAX_EXIT_CODE",
    "RETRYABLE_STYLE",
    "SECTION_STYLES",
    "TRANSIENT_ERRORS",
]
