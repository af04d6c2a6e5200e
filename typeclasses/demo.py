"""
Demonstration program: threads a number through a chain of halving steps
and prints what comes out of each scenario
"""
import argparse
import logging
from collections.abc import Sequence

from pydantic import BaseModel, Field, ValidationError
from rich.console import Console

from .maybe import Just, Maybe, Nothing
from .monad import chain

logger = logging.getLogger(__name__)

MAX_STEPS = 64


class DemoSettings(BaseModel):
    """
    Settings for the halving demonstration
    """
    start: int = 20
    steps: int = Field(default=5, ge=0, le=MAX_STEPS)
    verbose: bool = False


def half(x: int) -> Maybe[int]:
    """
    Halves a number, truncating toward zero.
    Zero has no half.
    """
    if x == 0:
        return Nothing
    q = abs(x) // 2
    return Just(q if x > 0 else -q)


def configure_logging(verbose: bool) -> None:
    """
    Sends this module's debug output to stderr when verbose,
    otherwise puts the logger back to warnings through the root handlers
    """
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)
    logger.propagate = not verbose
    if not verbose:
        return
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


def traced(x: int) -> Maybe[int]:
    """ half, with the step logged """
    result = half(x)
    logger.debug("half(%s) = %s", x, result)
    return result


def parse_settings(argv: Sequence[str] | None = None) -> DemoSettings:
    """
    Reads the settings from the command line
    Raises ValidationError for values the settings model rejects
    """
    parser = argparse.ArgumentParser(
        prog="typeclasses",
        description="Thread a number through a chain of halving steps.")
    parser.add_argument("start", nargs="?", default=20,
                        help="starting value (default 20)")
    parser.add_argument("steps", nargs="?", default=5,
                        help="halving steps after the first "
                        f"(default 5, at most {MAX_STEPS})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log every step")
    args = parser.parse_args(argv)
    return DemoSettings.model_validate(vars(args))


def run(settings: DemoSettings, console: Console) -> Maybe[int]:
    """
    Scenario 1: one halving step from the start value
    Scenario 2: the result of scenario 1 through the remaining steps
    Returns the final result
    """
    start: Maybe[int] = Just(settings.start)
    first = start >> traced
    console.print(f"[bold]1.[/bold] {start} >> half = {first}")
    final = chain(first, *[traced] * settings.steps)
    console.print(f"[bold]2.[/bold] {first} >> half x{settings.steps}"
                  f" = {final}")
    return final


def main(argv: Sequence[str] | None = None) -> int:
    """ Entry point for python -m typeclasses """
    console = Console()
    try:
        settings = parse_settings(argv)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            console.print(f"[red]invalid {field}:[/red] {error['msg']}")
        return 2
    configure_logging(settings.verbose)
    logger.debug("settings: %s", settings)
    run(settings, console)
    return 0
