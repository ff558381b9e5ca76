"""CLI orchestration: wires config, dictionary parser, and plist writer together."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from udic_plist.config import AppConfig, load_config
from udic_plist.plist import OutputWriteError, render, save
from udic_plist.udic import (
    InputNotFoundError,
    InputReadError,
    ParseResult,
    load_entries,
)

console = Console()


def setup_logging() -> None:
    """Configure logging with rich handler for colored, readable output."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _print_summary_table(result: ParseResult) -> None:
    """Print a summary table of how the input lines were handled.

    Args:
        result: The parse result of the converted dictionary.
    """
    # The empty-result warning is not tied to a line
    discarded = len(result.warnings) - (0 if result.entries else 1)

    table = Table(title="Conversion Summary")
    table.add_column("Lines", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Converted", str(len(result.entries)))
    table.add_row("Comments / blank", str(result.skipped))
    table.add_row("Discarded", f"[yellow]{discarded}[/yellow]" if discarded else "0")

    console.print()
    console.print(table)


def convert(config: AppConfig) -> ParseResult:
    """Convert the configured dictionary file to a plist file.

    Args:
        config: Validated application configuration.

    Returns:
        The parse result of the input file.

    Raises:
        InputNotFoundError: If the input file does not exist.
        InputReadError: If the input file cannot be read or decoded.
        OutputWriteError: If the output file cannot be written.
    """
    logger = logging.getLogger(__name__)

    input_file = config.input_file
    output_file = config.output_file
    logger.info("Using input file: %s", input_file)
    logger.info("Using output file: %s", output_file)

    # Step 1: Read and parse the dictionary
    result = load_entries(input_file)
    for warning in result.warnings:
        logger.warning(warning)

    # Step 2: Render and write the plist
    save(output_file, render(result.entries))

    console.print(
        f"\n[green bold]Successfully converted {input_file.name} "
        f"to {output_file.name}[/green bold]"
    )
    logger.info("Output written to: %s", output_file)
    logger.info("Number of words converted: %d", len(result.entries))

    return result


def run(
    input_path: str | None = None,
    output_path: str | None = None,
    config_path: str | None = None,
    base_dir: str | Path | None = None,
) -> int:
    """Main synchronous entry point for the CLI.

    Args:
        input_path: Dictionary text file, defaults to dict.txt.
        output_path: Plist file to write, defaults to dict.plist.
        config_path: Optional path to a YAML configuration file.
        base_dir: Directory relative paths resolve against.

    Returns:
        The number of entries written to the plist file.
    """
    setup_logging()
    logger = logging.getLogger(__name__)

    try:
        console.print("[bold cyan]User Dictionary to Plist Converter[/bold cyan]")
        console.print("[dim]" + "─" * 50 + "[/dim]")

        config = load_config(
            config_path=config_path,
            input_path=input_path,
            output_path=output_path,
            base_dir=base_dir,
        )
        if config_path:
            logger.info("Configuration loaded from %s", config_path)

        result = convert(config)
        _print_summary_table(result)
        return len(result.entries)

    except InputNotFoundError as e:
        console.print(
            f"[red bold]Error:[/red bold] Input file '{e.path.name}' "
            f"not found at '{e.path}'."
        )
        console.print("Please make sure the file exists or check the path.")
        raise SystemExit(1)
    except InputReadError as e:
        console.print(f"[red bold]Error:[/red bold] {e}")
        raise SystemExit(1)
    except OutputWriteError as e:
        console.print(f"[red bold]Error:[/red bold] {e}")
        raise SystemExit(1)
    except FileNotFoundError as e:
        console.print(f"[red bold]Error:[/red bold] {e}")
        raise SystemExit(1)
    except ValueError as e:
        console.print(f"[red bold]Configuration error:[/red bold] {e}")
        raise SystemExit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Conversion cancelled by user.[/yellow]")
        raise SystemExit(130)
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        raise SystemExit(1)
