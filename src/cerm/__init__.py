"""cerm: warn/err style diagnostics and early exit for command-line programs."""

from .cli_utils import emit, err, err_code, program_name, warn
from .models import Err, Ok, Outcome
from .unwrap import attempt, require

__version__ = "1.0.0"
__all__ = [
    "Err",
    "Ok",
    "Outcome",
    "attempt",
    "emit",
    "err",
    "err_code",
    "program_name",
    "require",
    "warn",
]
