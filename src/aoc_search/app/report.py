# app/report.py
from collections.abc import Mapping
from typing import Any


def format_report(year: int, day: int, answers: Mapping[int, Any]) -> str:
    lines = []
    for part in sorted(answers):
        lines.append(f"Year {year} Day {day} Part {part}")
        lines.append(str(answers[part]))
    return "\n".join(lines)
