from enum import Enum
from typing import Any, List, Mapping, Optional

from lloc_stats.core.models import ReportBuffer


class OutputFormat(Enum):
    TEXT = "text"
    CSV = "csv"


def select_output_format(dest: Optional[str]) -> OutputFormat:
    # a destination only switches the format, nothing is written to it
    return OutputFormat.CSV if dest else OutputFormat.TEXT


def _format_value(value: Any) -> str:
    if isinstance(value, Mapping):
        if not value:
            return "  (empty)"
        return "\n".join(f"  {key} => {val}" for key, val in value.items())
    return str(value)


def render_text(buffer: ReportBuffer) -> str:
    blocks: List[str] = []
    for label, value in buffer.items():
        blocks.append(f"{label}:\n{_format_value(value)}")
    return "\n\n".join(blocks)


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def render_csv(buffer: ReportBuffer) -> str:
    header: List[str] = []
    values: List[str] = []

    for label, value in buffer.items():
        if _is_plain_int(value):
            header.append(label)
            values.append(str(value))

    return ",".join(header) + "\n" + ",".join(values)


def render(buffer: ReportBuffer, fmt: OutputFormat) -> str:
    if fmt is OutputFormat.CSV:
        return render_csv(buffer)
    return render_text(buffer)
