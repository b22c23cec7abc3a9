"""Rich-based display functions for Inbox Triage."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from .models import BatchSummary, RankedMessage

console = Console()

_PRIORITY_COLORS = {"urgent": "red", "high": "yellow", "medium": "white", "low": "green"}
_CATEGORY_COLORS = {
    "urgent": "red",
    "standard": "cyan",
    "follow-up": "green",
    "admin": "blue",
    "spam": "magenta",
}


def _priority_color(priority: str) -> str:
    """Return a Rich color name for a priority level."""
    return _PRIORITY_COLORS.get(priority, "white")


def _truncate(text: str, width: int = 50) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"


def display_ranked(ranked: list[RankedMessage], title: str = "Triage Results") -> None:
    """Display a ranked batch, most pressing first."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Priority")
    table.add_column("Category")
    table.add_column("Urgency", justify="right")
    table.add_column("Business", justify="right")
    table.add_column("From")
    table.add_column("Subject")
    table.add_column("Action")

    for idx, item in enumerate(ranked, start=1):
        analysis = item.analysis
        color = _priority_color(analysis.priority)
        cat_color = _CATEGORY_COLORS.get(analysis.category, "white")
        table.add_row(
            str(idx),
            f"[{color}]{analysis.priority}[/{color}]",
            f"[{cat_color}]{analysis.category}[/{cat_color}]",
            str(analysis.urgency_score),
            str(analysis.business_relevance),
            escape(_truncate(item.message.sender or "", 30)),
            escape(_truncate(item.message.subject or "(no subject)")),
            "yes" if analysis.action_required else "",
        )

    console.print(table)


def display_summary(summary: BatchSummary) -> None:
    """Display aggregate counts for a batch."""
    priorities = "  ".join(
        f"[{_priority_color(p)}]{p}: {n}[/{_priority_color(p)}]"
        for p, n in summary.by_priority.items()
    )
    categories = "  ".join(f"{c}: {n}" for c, n in summary.by_category.items() if n)

    console.print(
        Panel(
            f"Total messages: {summary.total}  |  "
            f"Urgent: {summary.urgent_count}  |  "
            f"High priority: {summary.high_priority_count}  |  "
            f"Action required: {summary.action_required_count}\n"
            f"{priorities}\n"
            f"{categories or '[dim]no messages[/dim]'}",
            title="Summary",
        )
    )


def display_message_detail(item: RankedMessage) -> None:
    """Display the full analysis for a single message."""
    analysis = item.analysis
    color = _priority_color(analysis.priority)

    lines = [
        f"[bold]From:[/bold] {escape(item.message.sender or '')}",
        f"[bold]Subject:[/bold] {escape(item.message.subject or '')}",
        f"[bold]Priority:[/bold] [{color}]{analysis.priority}[/{color}]",
        f"[bold]Category:[/bold] {analysis.category}",
        f"[bold]Urgency:[/bold] {analysis.urgency_score}  "
        f"[bold]Business relevance:[/bold] {analysis.business_relevance}",
        f"[bold]Sentiment:[/bold] {analysis.sentiment}  "
        f"[bold]Read time:[/bold] {analysis.estimated_read_time} min",
        f"[bold]Customer:[/bold] {analysis.customer_type}",
    ]

    if analysis.job_value is not None:
        lines.append(f"[bold]Job value:[/bold] ${analysis.job_value:,.2f}")

    if analysis.keywords:
        lines.append(f"[bold]Keywords:[/bold] {escape(', '.join(analysis.keywords))}")

    if analysis.suggested_actions:
        lines.append("")
        lines.append("[bold]Suggested actions:[/bold]")
        for action in analysis.suggested_actions:
            lines.append(f"  - {action}")

    lines.append("")
    lines.append(f"[dim]{analysis.reasoning}[/dim]")

    console.print(Panel("\n".join(lines), title="Message Detail"))


def create_progress(description: str) -> Progress:
    """Create a configured Rich Progress bar."""
    return Progress(
        SpinnerColumn(),
        TextColumn(f"[bold blue]{description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    )


def display_auth_status(ok: bool, detail: str) -> None:
    """Report the outcome of a Gmail authentication check."""
    if ok:
        console.print(f"[green]Authenticated as {escape(detail)}[/green]")
    else:
        console.print(f"[red]Authentication failed:[/red] {escape(detail)}")
