"""Scenario runner for the context retention check.

A scenario is a fixed list of prompts sent with the same continuation
setting. Running the isolated scenario and then the continued one shows
whether the assistant remembers the first prompt when answering the second.

Calls are strictly sequential: a prompt is only sent after the previous
response has been printed, and a scenario only starts after the previous one
has finished.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from .formatters import TranscriptPrinter
from .invoker import Invoker
from .shared.logging import get_logger

logger = get_logger(__name__)

RECALL_PROMPT = "What was the animal I just asked about?"


@dataclass(frozen=True)
class Scenario:
    """A labeled group of prompts sharing one continuation setting."""

    name: str
    title: str
    use_continue: bool
    prompts: tuple[str, ...]


ISOLATED_SCENARIO = Scenario(
    name="isolated",
    title="Testing WITHOUT --continue flag",
    use_continue=False,
    prompts=("Tell me one interesting fact about cats.", RECALL_PROMPT),
)

CONTEXT_SCENARIO = Scenario(
    name="context",
    title="Testing WITH --continue flag",
    use_continue=True,
    prompts=("Tell me one interesting fact about dogs.", RECALL_PROMPT),
)

DEFAULT_SCENARIOS = (ISOLATED_SCENARIO, CONTEXT_SCENARIO)

SCENARIOS_BY_NAME = {scenario.name: scenario for scenario in DEFAULT_SCENARIOS}


def select_scenarios(names: Iterable[str]) -> tuple[Scenario, ...]:
    """Look up scenarios by name, keeping the order given.

    An empty selection means every default scenario.
    """
    names = tuple(names)
    if not names:
        return DEFAULT_SCENARIOS
    unknown = [name for name in names if name not in SCENARIOS_BY_NAME]
    if unknown:
        raise ValueError(f"Unknown scenario: {', '.join(unknown)}")
    return tuple(SCENARIOS_BY_NAME[name] for name in names)


async def run_scenario(
    scenario: Scenario,
    invoker: Invoker,
    printer: TranscriptPrinter,
) -> list[str]:
    """Send each prompt of a scenario in order and print the exchange.

    Args:
        scenario: Prompts and continuation setting
        invoker: Executes a single prompt
        printer: Transcript output

    Returns:
        Responses in call order
    """
    logger.info("scenario_started", scenario=scenario.name, use_continue=scenario.use_continue)
    printer.scenario_header(scenario.title)

    responses = []
    for call_number, prompt in enumerate(scenario.prompts, start=1):
        printer.prompt(call_number, prompt)
        response = await invoker.invoke(prompt, scenario.use_continue)
        printer.response(response)
        responses.append(response)

    logger.info("scenario_finished", scenario=scenario.name, calls=len(responses))
    return responses


async def run_scenarios(
    scenarios: Iterable[Scenario],
    invoker: Invoker,
    printer: TranscriptPrinter | None = None,
) -> list[list[str]]:
    """Run scenarios one after another.

    Any InvocationError propagates unchanged and stops the remaining calls.

    Returns:
        Responses per scenario, in scenario order
    """
    printer = printer or TranscriptPrinter()
    results = []
    for index, scenario in enumerate(scenarios):
        if index:
            printer.scenario_gap()
        results.append(await run_scenario(scenario, invoker, printer))
    return results
