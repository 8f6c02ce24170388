"""Rich-based observer for translation reports.

Prints a table of translated and unresolved fields to a Rich console,
useful while building catalogs to spot missing translations.

Requires the 'rich' package: pip install rich
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from field_error_translator.events import (
    TranslationEvent,
    TranslationEventType,
    TranslationObserver,
)

if TYPE_CHECKING:
    from rich.console import Console
    from rich.table import Table

__all__ = ["TranslationReportObserver"]


class TranslationReportObserver(TranslationObserver):
    """Report of every translation call, printed when the call completes.

    Example:
        from rich.console import Console

        observer = TranslationReportObserver(Console(), only_unresolved=True)
        translator.add_observer(observer)
        translator.translate(error_map)  # prints the report

    Requires:
        pip install rich
    """

    def __init__(
        self,
        console: Console | None = None,
        only_unresolved: bool = False,
        title: str = "Translations",
    ) -> None:
        """Initialize the report observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
            only_unresolved: If True, only list fields without a message.
            title: Title of the printed table.
        """
        from rich.console import Console

        self._console = console or Console()
        self._only_unresolved = only_unresolved
        self._title = title
        self._rows: list[tuple[str, bool, str]] = []
        self._reports = 0

    @property
    def reports(self) -> int:
        """Number of reports printed so far."""
        return self._reports

    def on_event(self, event: TranslationEvent) -> None:
        """Collect field outcomes and print the report on completion.

        Args:
            event: The translation event to handle.
        """
        if event.event_type == TranslationEventType.TRANSLATION_STARTED:
            self._rows = []

        elif event.event_type == TranslationEventType.FIELD_TRANSLATED:
            self._rows.append((event.data["field"], True, event.data["message"]))

        elif event.event_type == TranslationEventType.FIELD_UNRESOLVED:
            errors = ", ".join(str(e) for e in event.data.get("errors", []))
            self._rows.append((event.data["field"], False, errors))

        elif event.event_type == TranslationEventType.TRANSLATION_COMPLETED:
            self._print_report(event.data)
            self._rows = []
            self._reports += 1

    def _print_report(self, data: dict[str, Any]) -> None:
        from rich.text import Text

        self._console.print(self._build_table())

        translated = data.get("translated", 0)
        unresolved = len(data.get("unresolved", []))
        summary = Text()
        summary.append(f"Translated: {translated}  ", style="green")
        summary.append(f"Unresolved: {unresolved}  ", style="red" if unresolved else "dim")
        summary.append(f"({data.get('duration_ms', 0.0):.2f} ms)", style="dim")
        self._console.print(summary)

    def _build_table(self) -> Table:
        """Build the report table.

        Returns:
            Rich Table with one row per field.
        """
        from rich.table import Table
        from rich.text import Text

        table = Table(
            title=self._title,
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("Field", style="cyan")
        table.add_column("Status")
        table.add_column("Message / Errors", style="yellow")

        rows = [row for row in self._rows if not (self._only_unresolved and row[1])]
        for field, found, text in rows:
            # Field names and messages are plain text, never markup.
            status = "[green]✓[/]" if found else "[red]✗ missing[/]"
            table.add_row(Text(field or '""'), status, Text(text))

        if not rows:
            table.add_row("-", "-", "Nothing to report")

        return table
