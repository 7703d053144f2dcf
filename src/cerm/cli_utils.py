"""Unix-style diagnostics for command-line programs.

Every line written here has the shape ``progname: message``, where
``progname`` is the first entry of ``sys.argv``. This is the convention of
the BSD ``warnx(3)`` and ``errx(3)`` functions, which :func:`warn` and
:func:`err_code` mirror.
"""

import sys
from typing import Any, NoReturn

import click

# Used when the argument list is empty or its first entry is not valid text
FALLBACK_NAME = "Error"
DEFAULT_EXIT_CODE = 1


def program_name(argv: list[str] | None = None) -> str:
    """Return the name the running program was invoked as.

    Parameters
    ----------
    argv:
        Argument list to resolve against. Defaults to ``sys.argv``, read
        afresh on every call.

    Returns
    -------
    str
        ``argv[0]``, or :data:`FALLBACK_NAME` if there is no such entry or
        it holds bytes that could not be decoded at startup.
    """
    if argv is None:
        argv = getattr(sys, "argv", None) or []
    if not argv:
        return FALLBACK_NAME

    name = argv[0]
    try:
        # Undecodable argv bytes survive as lone surrogates
        name.encode("utf-8")
    except UnicodeEncodeError:
        return FALLBACK_NAME
    return name


def format_message(template: str, args: tuple, kwargs: dict[str, Any]) -> str:
    """Render ``template`` with ``str.format`` semantics.

    The template is formatted even without arguments, so ``{{`` and ``}}``
    always come out as single braces. Text holding literal braces should be
    passed as an argument: ``warn("{}", text)``.
    """
    return template.format(*args, **kwargs)


def emit(message: str, prog: str | None = None) -> None:
    """Write ``prog: message`` and a newline to stderr in a single write.

    When the process has no stderr at all (``sys.stderr is None``, as under
    ``pythonw``) there is nowhere to write and ``click.echo`` drops the line.
    The fatal emitters still exit with their code in that case.
    """
    if prog is None:
        prog = program_name()
    # color=True: pass escape sequences through, even when stderr is not a tty
    click.echo(f"{prog}: {message}", err=True, color=True)


def warn(template: str, /, *args: Any, **kwargs: Any) -> None:
    """Print a diagnostic to stderr and carry on."""
    emit(format_message(template, args, kwargs))


def err_code(code: int, template: str, /, *args: Any, **kwargs: Any) -> NoReturn:
    """Print a diagnostic to stderr and exit with ``code``.

    The message is rendered before anything is written, so a bad template
    raises its formatting error instead of exiting.
    """
    emit(format_message(template, args, kwargs))
    sys.exit(code)


def err(template: str, /, *args: Any, **kwargs: Any) -> NoReturn:
    """Same as :func:`err_code`, always exiting with status 1."""
    err_code(DEFAULT_EXIT_CODE, template, *args, **kwargs)
