"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
It doubles as the notifier for sync components, so notices from the engine
and the object store client appear on the console. Supports verbosity levels
and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner
from rich.table import Table

from src.file_mapper.models import SyncConfig
from src.sync_engine.models import SyncPassResult
from src.sync_engine.notifier import Notifier

MASK = '********'


class OutputHandler(Notifier):
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Operation completed")
        >>> with handler.spinner("Testing connection..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def notice(self, message: str) -> None:
        """Display a notice from a sync component."""
        self.console.print(f"[cyan]•[/cyan] {message}")

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    def print(self, message: str) -> None:
        self.console.print(message)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        Example:
            >>> with handler.spinner("Testing connection..."):
            ...     service.test_connection()
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10):
            yield

    def print_summary(self, result: Optional[SyncPassResult]) -> None:
        """Display the outcome of a sync pass with color coding.

        Args:
            result: Result of the pass (None if the pass did not complete)
        """
        self.console.print("\n[bold]Sync Summary:[/bold]")

        if result is None:
            self.console.print("\n[red]Sync did not complete[/red]")
            return

        if result.success_count > 0:
            self.console.print(f"  [blue]↓[/blue] Imported: {result.success_count} document(s)")

        if result.failed_keys:
            self.console.print(f"  [red]✗[/red] Failed: {len(result.failed_keys)} document(s)")
            for key in result.failed_keys:
                self.debug(f"    {key}")

        if result.skipped_keys:
            self.console.print(f"  [yellow]⊘[/yellow] Not downloaded: {len(result.skipped_keys)} document(s)")
            for key in result.skipped_keys:
                self.debug(f"    {key}")

        if result.candidate_count == 0:
            self.console.print("\n[green]Already in sync. No new documents.[/green]")
        elif result.failed_keys or result.skipped_keys:
            self.console.print("\n[yellow]Sync completed with errors[/yellow]")
        else:
            self.console.print("\n[green]Sync completed successfully[/green]")

    def print_config(self, config: SyncConfig) -> None:
        """Display the settings, masking the secret.

        Args:
            config: Configuration to display
        """
        table = Table(title="Sync Settings", show_header=True, header_style="bold")
        table.add_column("Setting")
        table.add_column("Value")

        table.add_row("bucket_name", config.bucket_name)
        table.add_row("endpoint", config.endpoint)
        table.add_row("region", config.region)
        table.add_row("access_key", config.access_key)
        table.add_row("access_secret", MASK if config.access_secret else "")
        table.add_row("remote_prefix", config.remote_prefix)
        table.add_row("sync_folder", config.sync_folder)
        table.add_row("auto_sync", "on" if config.auto_sync else "off")
        table.add_row("auto_sync_interval", f"{config.auto_sync_interval} min")
        table.add_row("last_sync_time", config.last_sync_time or "never synced")
        if config.last_sync_timestamp > 0:
            table.add_row("last_sync_timestamp", str(config.last_sync_timestamp))

        self.console.print(table)
