"""CLI main entry point."""

import asyncio
import sys

import click

__version__ = "1.0.0"  # Defined here to avoid circular import

from .config import load_config
from .errors import ConfigError, InvocationError
from .formatters import TranscriptPrinter, print_config_error, print_error
from .invoker import ProcessInvoker
from .scenarios import SCENARIOS_BY_NAME, run_scenarios, select_scenarios
from .shared.logging import LOG_LEVELS, configure_logging, get_logger, verbosity_to_level

logger = get_logger(__name__)


@click.command()
@click.option("--executable", help="Assistant command to run (default: claude)")
@click.option("--continue-flag", help="Argument that continues the last session (default: -c)")
@click.option(
    "-s",
    "--scenario",
    "scenario_names",
    multiple=True,
    type=click.Choice(list(SCENARIOS_BY_NAME)),
    help="Run only this scenario (repeatable, runs in the order given)",
)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Set the log level explicitly",
)
@click.option("--json-logs", is_flag=True, help="Write log records as JSON")
@click.version_option(__version__, prog_name="context-probe")
def cli(
    executable: str | None,
    continue_flag: str | None,
    scenario_names: tuple[str, ...],
    verbose: int,
    log_level: str | None,
    json_logs: bool,
) -> None:
    """Check whether an assistant CLI remembers earlier calls.

    Sends the same pair of prompts twice: once as isolated calls and once
    with the continuation flag, printing every prompt and response.
    """
    try:
        config = load_config()
        config.apply_overrides(
            executable=executable,
            continue_flag=continue_flag,
            log_level=log_level or (verbosity_to_level(verbose) if verbose else None),
        )
    except ConfigError as e:
        print_config_error(e.message)
        sys.exit(1)

    configure_logging(config.log_level, json_output=json_logs)
    logger.debug(
        "config_loaded",
        executable=config.executable,
        executable_source=config.get_source("executable"),
        continue_flag=config.continue_flag,
    )

    invoker = ProcessInvoker(executable=config.executable, continue_flag=config.continue_flag)
    scenarios = select_scenarios(scenario_names)

    try:
        asyncio.run(run_scenarios(scenarios, invoker, TranscriptPrinter()))
    except InvocationError as e:
        print_error(e.message)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
