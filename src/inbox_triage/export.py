"""Export triage results to CSV or JSON."""

import csv
import json

from .models import RankedMessage

_FIELDNAMES = [
    "rank",
    "message_id",
    "from",
    "subject",
    "date",
    "priority",
    "category",
    "urgency_score",
    "business_relevance",
    "action_required",
    "estimated_read_time",
    "sentiment",
    "customer_type",
    "job_value",
    "keywords",
    "suggested_actions",
    "reasoning",
]


def _to_row(rank: int, item: RankedMessage) -> dict:
    message = item.message
    analysis = item.analysis
    return {
        "rank": rank,
        "message_id": message.message_id,
        "from": message.sender,
        "subject": message.subject,
        "date": message.date.isoformat() if message.date else "",
        "priority": analysis.priority,
        "category": analysis.category,
        "urgency_score": analysis.urgency_score,
        "business_relevance": analysis.business_relevance,
        "action_required": analysis.action_required,
        "estimated_read_time": analysis.estimated_read_time,
        "sentiment": analysis.sentiment,
        "customer_type": analysis.customer_type,
        "job_value": analysis.job_value,
        "keywords": list(analysis.keywords),
        "suggested_actions": list(analysis.suggested_actions),
        "reasoning": analysis.reasoning,
    }


def export_ranked(ranked: list[RankedMessage], format: str, output_path: str) -> None:
    """Export a ranked batch to a file, preserving rank order.

    Args:
        ranked: Messages with their analyses, already sorted.
        format: Output format, either 'csv' or 'json'.
        output_path: Path to write the output file.
    """
    rows = [_to_row(rank, item) for rank, item in enumerate(ranked, start=1)]

    if format == "csv":
        with open(output_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=_FIELDNAMES)
            writer.writeheader()
            for row in rows:
                row["keywords"] = "; ".join(row["keywords"])
                row["suggested_actions"] = "; ".join(row["suggested_actions"])
                if row["job_value"] is None:
                    row["job_value"] = ""
                writer.writerow(row)
    elif format == "json":
        with open(output_path, "w") as f:
            json.dump(rows, f, indent=2)
    else:
        raise ValueError(f"Unsupported export format: {format}")
