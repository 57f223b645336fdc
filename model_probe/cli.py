"""CLI interface for the model availability probe."""

from functools import partial
from typing import Optional, Sequence

import typer
from rich.console import Console
from rich.markup import escape

from model_probe.candidates import MODEL_IDS_TO_TEST
from model_probe.core.config import MissingCredentialError, get_settings, mask_api_key
from model_probe.core.llm import get_chat_model
from model_probe.prober import PROBE_MAX_TOKENS, probe_models
from model_probe.report import ConsoleReporter, build_report, exit_status

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(help="Check which Anthropic model ids are available for your API key")
console = Console()


def run_check(
    api_key: str,
    model_ids: Sequence[str] = MODEL_IDS_TO_TEST,
    output_format: str = "text",
    out: Optional[Console] = None,
) -> int:
    """
    Probe every candidate and render the outcome.

    Args:
        api_key: Resolved Anthropic API key
        model_ids: Candidates to probe, in order
        output_format: "text" streams progress and a summary, "json" prints the report payload
        out: Console to render to

    Returns:
        Process exit status: 0 if any model is available, 1 otherwise
    """
    out = out or console
    reporter = ConsoleReporter(out) if output_format == "text" else None

    # The CLI talks to the API from a client context, so it opts in to direct access
    factory = partial(get_chat_model, api_key=api_key, browser_access=True, max_tokens=PROBE_MAX_TOKENS)

    if reporter:
        reporter.render_header()
    results = probe_models(factory, model_ids, listener=reporter)

    if reporter:
        reporter.render_summary(results)
    else:
        out.print_json(build_report(results).model_dump_json(by_alias=True, exclude_none=True))

    status = exit_status(results)
    if reporter:
        if status:
            out.print("\n[red]❌ No models are available - check your API key and permissions[/red]")
        else:
            out.print("\n[green]✅ Test completed successfully[/green]")
    return status


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context):
    """Run `check` when no command is given."""
    if ctx.invoked_subcommand is None:
        check(output_format="text")


@app.command()
def check(
    output_format: str = typer.Option("text", "--format", "-f", help="Output format: text or json"),
):
    """Probe every candidate model id once and report which are available."""
    if output_format not in OUTPUT_FORMATS:
        console.print(f"[red]Error: unknown format '{output_format}' (expected text or json)[/red]")
        raise typer.Exit(2)

    settings = get_settings()

    try:
        api_key = settings.require_api_key()
    except MissingCredentialError as e:
        console.print("[red]Error: ANTHROPIC_API_KEY not found in environment[/red]")
        console.print(str(e))
        console.print("\nCurrent environment variables:")
        for name, value in settings.api_key_sources().items():
            console.print(f"  {name}: {'Set' if value else 'Not set'}")
        raise typer.Exit(1)

    if output_format == "text":
        console.print(f"API Key found: {mask_api_key(api_key)}")
        console.print(f"Testing {len(MODEL_IDS_TO_TEST)} model IDs\n")

    try:
        status = run_check(api_key, output_format=output_format)
    except Exception as e:
        console.print(f"\n[red]❌ Test failed with error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    raise typer.Exit(status)


@app.command()
def models():
    """List the candidate model ids."""
    console.print(f"[bold]Candidate models ({len(MODEL_IDS_TO_TEST)}):[/bold]")
    for model_id in MODEL_IDS_TO_TEST:
        console.print(f"  • {model_id}")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
