"""Read-side aggregates computed from a freshly fetched roster."""

from __future__ import annotations

from collections.abc import Sequence

from app.models.employee import Employee

TOP_EARNERS_LIMIT = 10


def search_by_name(employees: Sequence[Employee], query: str) -> list[Employee]:
    """Employees whose name equals ``query`` ignoring case (whole name, not substring)."""
    needle = query.lower()
    return [e for e in employees if e.name is not None and e.name.lower() == needle]


def highest_salary(employees: Sequence[Employee]) -> int:
    # 0 stands for "no employees"
    return max((e.salary for e in employees), default=0)


def top_earner_names(employees: Sequence[Employee], limit: int = TOP_EARNERS_LIMIT) -> list[str | None]:
    ranked = sorted(employees, key=lambda e: e.salary, reverse=True)
    return [e.name for e in ranked[:limit]]
