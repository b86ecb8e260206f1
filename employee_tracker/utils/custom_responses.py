from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from employee_tracker.utils.helpers import format_salary

RULE = "=" * 80
MONEY_COLUMNS = ("salary", "budget")


def create_console(file=None) -> Console:
    return Console(file=file, highlight=False)


def render_banner(console: Console, title: str, style: str = "bold green"):
    console.print(RULE, style=style)
    console.print(f"{title:^80}", style=style, markup=False)
    console.print(RULE, style=style)


def render_table(console: Console, title: str, rows: List[Dict], columns: Optional[List[str]] = None):
    render_banner(console, title)
    if not rows:
        console.print("(no rows)", style="dim")
        console.print(RULE, style="bold green")
        return
    columns = columns or list(rows[0].keys())
    table = Table(show_header=True, header_style="bold")
    for col in columns:
        table.add_column(col, justify="right" if col in MONEY_COLUMNS or col == "id" else "left")
    for row in rows:
        table.add_row(*[_cell(col, row.get(col)) for col in columns])
    console.print(table)
    console.print(RULE, style="bold green")


def render_success(console: Console, message: str):
    console.print(RULE, style="bold bright_green")
    console.print(message, style="bright_green", markup=False)
    console.print(RULE, style="bold bright_green")


def render_removed(console: Console, message: str):
    console.print(RULE, style="bold bright_red")
    console.print(message, style="bright_red", markup=False)
    console.print(RULE, style="bold bright_red")


def render_error(console: Console, error: str, message: str):
    console.print(RULE, style="bold bright_red")
    console.print(f"{error}: {message}", style="bright_red", markup=False)
    console.print(RULE, style="bold bright_red")


def render_notice(console: Console, message: str):
    console.print(message, style="yellow", markup=False)


def _cell(column, value):
    if value is None:
        return ""
    if column in MONEY_COLUMNS:
        return Text(format_salary(value))
    return Text(str(value))
