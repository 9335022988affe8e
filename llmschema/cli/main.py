"""llmschema command-line interface.

Repair, extract and check JSON produced by language models.

Usage:
    llmschema repair response.txt
    llmschema repair --disable trailing_commas -o json < response.txt
    llmschema extract response.md
    llmschema check data.json
    llmschema config show
"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from llmschema.cli import output
from llmschema.cli.config import (
    get_config_paths,
    get_effective_config,
    load_config,
    reset_config,
    update_config,
)
from llmschema.repair import (
    RepairOptions,
    extract_from_markdown,
    extract_json_from_text,
    is_valid_json,
    repair_json,
)
from llmschema.version import __version__

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(
    name="llmschema",
    help="Repair and validate JSON produced by language models.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Config subcommand group
config_app = typer.Typer(
    name="config",
    help="Manage CLI configuration.",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

console = Console()

# Common options as type aliases
PathArgument = Annotated[
    Path | None,
    typer.Argument(
        help="Input file (reads stdin when omitted)",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]

OutputFormatOption = Annotated[
    str | None,
    typer.Option(
        "--output",
        "-o",
        help="Output format: 'text' (human-readable) or 'json' (machine-readable)",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
]

DisableOption = Annotated[
    list[str] | None,
    typer.Option(
        "--disable",
        "-d",
        help=f"Repair stage to skip (repeatable): {', '.join(RepairOptions.stage_names())}",
    ),
]


def setup_logging(verbose: bool) -> None:
    """Configure the root logger for a CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def read_input(path: Path | None) -> str:
    """Read the input document from a file or stdin."""
    if path is not None:
        return path.read_text(encoding="utf-8")
    return sys.stdin.read()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"llmschema version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """llmschema - schema validation and JSON repair for LLM output.

    Pulls JSON out of chatty model responses, fixes the syntax mistakes models
    tend to make, and checks documents for strict JSON validity.
    """
    pass


@app.command()
def repair(
    path: PathArgument = None,
    output_format: OutputFormatOption = None,
    disable: DisableOption = None,
    special_as_strings: Annotated[
        bool,
        typer.Option(
            "--special-as-strings",
            help="Emit NaN/Infinity as quoted strings instead of null",
        ),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Repair malformed JSON.

    Runs markdown and prose extraction, comment removal, quote, key, number and
    comma fixes, then closes truncated brackets. Exits with code 1 when the
    result still does not parse.

    Examples:
        llmschema repair response.txt
        echo "{name: 'Ada',}" | llmschema repair
        llmschema repair response.txt -o json --disable close_brackets
    """
    try:
        config = get_effective_config(
            output_format=output_format,
            disabled_stages=disable,
            verbose=verbose or None,
        )
    except ValueError as e:
        output.print_error(str(e))
        raise typer.Exit(1) from None

    setup_logging(config.output.verbose)

    options = config.repair
    if special_as_strings:
        options = options.model_copy(update={"special_numbers_as_strings": True})

    result = repair_json(read_input(path), options)
    output.print_repair_result(result, config.output.format, config.output.verbose)

    if not result.success:
        raise typer.Exit(1)


@app.command()
def extract(
    path: PathArgument = None,
    output_format: OutputFormatOption = None,
) -> None:
    """Extract the JSON portion of a response without repairing it.

    Tries markdown code fences first, then the first balanced object or
    array in the surrounding text.

    Examples:
        llmschema extract response.md
        llmschema extract response.md -o json
    """
    try:
        config = get_effective_config(output_format=output_format)
    except ValueError as e:
        output.print_error(str(e))
        raise typer.Exit(1) from None

    markdown = extract_from_markdown(read_input(path))
    from_text = extract_json_from_text(markdown.text)

    if config.output.format == "json":
        source = None
        if markdown.extracted:
            source = "markdown"
        elif from_text.extracted:
            source = "text"
        print(
            json.dumps(
                {
                    "text": from_text.text,
                    "extracted": markdown.extracted or from_text.extracted,
                    "source": source,
                    "language": markdown.language,
                },
                indent=2,
            )
        )
        return

    print(from_text.text)


@app.command()
def check(
    path: PathArgument = None,
    output_format: OutputFormatOption = None,
) -> None:
    """Check whether input is strictly valid JSON.

    NaN and Infinity are rejected. Exits with code 0 when valid, 1 otherwise.

    Examples:
        llmschema check data.json
        cat data.json | llmschema check -o json
    """
    try:
        config = get_effective_config(output_format=output_format)
    except ValueError as e:
        output.print_error(str(e))
        raise typer.Exit(1) from None

    valid = is_valid_json(read_input(path))

    if config.output.format == "json":
        print(json.dumps({"valid": valid}))
    elif valid:
        output.print_success("Valid JSON")
    else:
        output.print_error(
            "Invalid JSON",
            hint="Run 'llmschema repair' to fix common model output problems",
        )

    if not valid:
        raise typer.Exit(1)


# Config subcommands


@config_app.command("show")
def config_show() -> None:
    """Show current configuration."""
    config = load_config()
    output.print_config(config.model_dump())

    paths = get_config_paths()
    output.print_info(f"\nConfig file: {paths['config_file']}")


@config_app.command("set")
def config_set(
    key: Annotated[
        str,
        typer.Argument(help="Config key (e.g., repair.trailing_commas, output.format)"),
    ],
    value: Annotated[
        str,
        typer.Argument(help="New value"),
    ],
) -> None:
    """Set a configuration value.

    Examples:
        llmschema config set repair.close_brackets false
        llmschema config set output.format json
    """
    try:
        update_config(key, value)
        output.print_success(f"Set {key} = {value}")
    except ValueError as e:
        output.print_error(str(e))
        raise typer.Exit(1) from None


@config_app.command("path")
def config_path() -> None:
    """Show configuration file paths."""
    paths = get_config_paths()
    console.print(f"Config directory: {paths['config_dir']}")
    console.print(f"Config file: {paths['config_file']}")


@config_app.command("reset")
def config_reset(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Skip confirmation",
        ),
    ] = False,
) -> None:
    """Restore the default configuration."""
    if not force:
        confirm = typer.confirm("Reset configuration to defaults?")
        if not confirm:
            raise typer.Abort()

    reset_config()
    output.print_success("Configuration reset to defaults")


def cli() -> None:
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
