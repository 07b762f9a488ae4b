import contextlib

with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package

    from .config import BEARTYPE_ALL_ENV, BEARTYPE_THIS_PACKAGE_ENV

    if os.environ.get(BEARTYPE_THIS_PACKAGE_ENV, "0") == "1":
        beartype_this_package()
    if os.environ.get(BEARTYPE_ALL_ENV, "0") == "1":
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))

# outcome loads first; aberration and concern import its variants
from .outcome import Failed, Outcome, Retryable, Succeeded  # isort: skip
from .aberration import Aberration, Fatal
from .concern import Concern
from .errors import FailedError, OutcomeError, RetryableError, UnwrapError
from .state import State

__all__: list[str] = [
    "Aberration",
    "Concern",
    "Failed",
    "FailedError",
    "Fatal",
    "Outcome",
    "OutcomeError",
    "Retryable",
    "RetryableError",
    "State",
    "Succeeded",
    "UnwrapError",
]
