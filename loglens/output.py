"""LogLens - Report output"""

import json
from typing import Dict, Optional

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ParseResult

BAR_WIDTH = 40

ERROR_COLUMNS = [('Timestamp', 'timestamp'), ('Error Type', 'type'), ('Details', 'details')]
EVENT_COLUMNS = [
    ('Timestamp', 'timestamp'),
    ('User', 'user'),
    ('Event', 'event'),
    ('Item ID', 'item_id'),
    ('Quantity', 'quantity'),
    ('Price', 'price'),
    ('IP', 'ip'),
]


def _cell(value) -> Text:
    return Text('' if value is None else str(value))


def _record_table(records, columns, empty_text: str, rows: Optional[int]) -> Table:
    table = Table(box=box.ROUNDED, show_lines=False)
    for title, _ in columns:
        table.add_column(title, style="cyan" if title == 'Timestamp' else None)

    shown = records if rows is None else records[:rows]
    for record in shown:
        table.add_row(*(_cell(getattr(record, attr)) for _, attr in columns))

    if not records:
        table.caption = empty_text
    elif len(shown) < len(records):
        table.caption = f"Showing {len(shown)} of {len(records)}"
    return table


def _bar_chart(counts: Dict[str, int], key_title: str, color: str) -> Table:
    table = Table(box=box.SIMPLE)
    table.add_column(key_title, style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("")

    peak = max(counts.values(), default=0)
    for key, count in counts.items():
        width = max(1, round(BAR_WIDTH * count / peak)) if peak else 0
        table.add_row(Text(key), str(count), f"[{color}]{'█' * width}[/]")
    return table


def print_report(result: ParseResult, console=None, rows: Optional[int] = 20):
    if console is None:
        print(json.dumps(result.to_dict(), indent=2, default=str))
        return

    summary = result.summary
    console.print("\n" + "═" * 70, style="cyan")
    console.print("              LOG FILE ANALYZER", style="bold cyan")
    console.print("═" * 70, style="cyan")

    console.print(Panel.fit(
        f"Total Lines: [cyan]{summary.total_lines:,}[/]\n"
        f"Errors: [{'red' if summary.error_count > 0 else 'green'}]{summary.error_count:,}[/]\n"
        f"JSON Logs: [cyan]{summary.event_count:,}[/]",
        title="Summary",
        border_style="cyan"
    ))

    console.print("\n" + "─" * 70, style="cyan")
    console.print("ERROR LOGS", style="bold red")
    console.print(_record_table(result.errors, ERROR_COLUMNS, "No error logs found", rows))

    if result.errors_by_date:
        console.print("\n" + "─" * 70, style="cyan")
        console.print("ERROR LOG COUNT BY DATE", style="bold")
        console.print(_bar_chart(result.errors_by_date, "Date", "magenta"))

    console.print("\n" + "─" * 70, style="cyan")
    console.print("JSON LOGS", style="bold")
    console.print(_record_table(result.events, EVENT_COLUMNS, "No JSON logs found", rows))

    if result.events_by_type:
        console.print("\n" + "─" * 70, style="cyan")
        console.print("EVENT COUNT BY TYPE", style="bold")
        console.print(_bar_chart(result.events_by_type, "Event", "green"))

    console.print("\n" + "═" * 70, style="cyan")
