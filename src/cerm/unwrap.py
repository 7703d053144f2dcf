"""Unwrap outcomes, turning failures into a diagnostic and exit."""

from typing import Any, Callable, TypeVar, overload

from .cli_utils import err
from .models import Err, Ok, Outcome

T = TypeVar("T")


@overload
def require(outcome: Outcome[T, Any], /) -> T: ...


@overload
def require(outcome: T | None, template: str, /, *args: Any, **kwargs: Any) -> T: ...


def require(outcome: Any, template: str | None = None, /, *args: Any, **kwargs: Any) -> Any:
    """Return the payload of ``outcome``, or report the failure and exit 1.

    Two call shapes are supported.

    ``require(outcome)``
        ``outcome`` must be an :class:`Ok` or an :class:`Err`. An ``Ok``
        yields its value; an ``Err`` is printed as ``str(error)``.

    ``require(value, template, *args, **kwargs)``
        ``value`` is returned unless it is ``None``, in which case the
        caller's template is printed. ``None`` says nothing about what went
        wrong, so the message has to be supplied.

    Parameters
    ----------
    outcome:
        The outcome to unwrap.
    template:
        Message template for the optional shape, formatted like
        :func:`cerm.warn`.

    Raises
    ------
    TypeError
        If called without a template on something that is not an outcome.
    """
    if template is not None:
        if outcome is None:
            err(template, *args, **kwargs)
        return outcome

    if isinstance(outcome, Ok):
        return outcome.value
    if isinstance(outcome, Err):
        err("{e}", e=outcome.error)
    raise TypeError(
        f"require() expected Ok or Err, got {type(outcome).__name__}; "
        "pass a message to require an optional value"
    )


def attempt(func: Callable[..., T], /, *args: Any, **kwargs: Any) -> Outcome[T, Exception]:
    """Call ``func`` and capture its result as an outcome.

    Only :class:`Exception` is captured; ``KeyboardInterrupt`` and
    ``SystemExit`` propagate.
    """
    try:
        return Ok(func(*args, **kwargs))
    except Exception as e:
        return Err(e)
