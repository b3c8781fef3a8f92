"""CLI entrypoint for codex-bridge."""

import logging

import rich_click as click

from codex_bridge import __version__
from codex_bridge.runtime.controllers import (
    AgentOptions,
    BridgeCliController,
    BridgeCommandResult,
    RequestCommand,
    TaskCommand,
)
from codex_bridge.runtime.prompts import DEFAULT_IMAGE_SIZE

click.rich_click.USE_MARKDOWN = True
BRIDGE_CONTROLLER = BridgeCliController()


@click.group()
@click.version_option(version=__version__, prog_name="codex-bridge")
@click.option(
    "--executable",
    default=None,
    help="Agent executable. If omitted, CODEX_BRIDGE_EXECUTABLE or `codex` is used.",
)
@click.option(
    "--model",
    default=None,
    help="Model id passed to `codex exec --model`. If omitted, CODEX_BRIDGE_MODEL is used.",
)
@click.option(
    "--timeout-seconds",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Kill the agent after this many seconds. Unbounded by default.",
)
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def codex_bridge(
    ctx: click.Context,
    executable: str | None,
    model: str | None,
    timeout_seconds: float | None,
    verbose: bool,
) -> None:
    """Run writing tasks through the Codex CLI agent."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    ctx.obj = AgentOptions(
        executable=executable,
        model=model,
        timeout_seconds=timeout_seconds,
    )


@codex_bridge.command("check")
@click.pass_obj
def check(options: AgentOptions) -> None:
    """Check whether the agent starts and reports its version."""

    result = BRIDGE_CONTROLLER.check(options)
    _emit_lines(result.lines)
    if not result.success:
        raise click.ClickException("Codex CLI is not available.")


@codex_bridge.command("request")
@click.argument("prompt")
@click.option("--context", default=None, help="Text placed before the prompt.")
@click.option(
    "--max-tokens",
    type=click.IntRange(min=1),
    default=None,
    help="Accepted for compatibility; not forwarded to the agent.",
)
@click.option(
    "--temperature",
    type=click.FloatRange(min=0),
    default=None,
    help="Accepted for compatibility; not forwarded to the agent.",
)
@click.pass_obj
def request(
    options: AgentOptions,
    prompt: str,
    context: str | None,
    max_tokens: int | None,
    temperature: float | None,
) -> None:
    """Send a free-form prompt to the agent. Use `-` to read PROMPT from stdin."""

    _finish(
        BRIDGE_CONTROLLER.request(
            options,
            RequestCommand(
                prompt=_read_text(prompt),
                context=context,
                max_tokens=max_tokens,
                temperature=temperature,
            ),
        ),
    )


@codex_bridge.command("improve")
@click.argument("text")
@click.pass_obj
def improve(options: AgentOptions, text: str) -> None:
    """Improve grammar and clarity of TEXT while keeping meaning and tone."""

    _run_task(options, "improve_text", text=_read_text(text))


@codex_bridge.command("continue")
@click.argument("context")
@click.pass_obj
def continue_story(options: AgentOptions, context: str) -> None:
    """Continue the story given in CONTEXT."""

    _run_task(options, "continue_story", context=_read_text(context))


@codex_bridge.command("analyze")
@click.argument("text")
@click.pass_obj
def analyze(options: AgentOptions, text: str) -> None:
    """Get character, plot, and structure feedback on TEXT."""

    _run_task(options, "analyze_story", text=_read_text(text))


@codex_bridge.command("image")
@click.argument("prompt")
@click.option("--size", default=DEFAULT_IMAGE_SIZE, show_default=True, help="Image size.")
@click.pass_obj
def image(options: AgentOptions, prompt: str, size: str) -> None:
    """Generate an image for PROMPT and print its URL."""

    _run_task(options, "generate_image", prompt=_read_text(prompt), size=size)


@codex_bridge.command("character")
@click.argument("description")
@click.pass_obj
def character(options: AgentOptions, description: str) -> None:
    """Write a detailed character profile from DESCRIPTION."""

    _run_task(options, "generate_character", description=_read_text(description))


@codex_bridge.command("plots")
@click.argument("premise")
@click.pass_obj
def plots(options: AgentOptions, premise: str) -> None:
    """Suggest five plot ideas for PREMISE."""

    _run_task(options, "generate_plot_ideas", premise=_read_text(premise))


def _run_task(options: AgentOptions, task: str, **arguments: str) -> None:
    _finish(BRIDGE_CONTROLLER.run_task(options, TaskCommand(task=task, arguments=arguments)))


def _finish(result: BridgeCommandResult) -> None:
    if not result.success:
        _emit_lines(result.lines, err=True)
        raise click.ClickException("Codex request failed.")
    _emit_lines(result.lines)


def _read_text(value: str) -> str:
    if value == "-":
        return click.get_text_stream("stdin").read()
    return value


def _emit_lines(lines: list[str], *, err: bool = False) -> None:
    for line in lines:
        click.echo(line, err=err)


if __name__ == "__main__":  # pragma: no cover
    codex_bridge()
