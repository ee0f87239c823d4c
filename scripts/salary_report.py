#!/usr/bin/env python3
"""Print a salary report for the upstream employee roster.

Run from the repository root:

    python3 scripts/salary_report.py [--search NAME] [--json] [--verbose]

Fetches the roster once through the employee gateway (same retry and
fail-open behaviour as the API) and prints the headcount, highest salary,
top ten earners and, with --search, the employees matching a name.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from app.core.config import Settings  # noqa: E402
from app.models.employee import Employee  # noqa: E402
from app.services.employee_aggregates import highest_salary, search_by_name, top_earner_names  # noqa: E402
from app.services.employee_gateway import EmployeeGateway  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Salary report for the upstream employee roster")
    parser.add_argument("--search", default=None, help="Also list employees with this exact name (case-insensitive)")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_report(employees: Sequence[Employee], search: str | None = None) -> dict[str, Any]:
    report: dict[str, Any] = {
        "employee_count": len(employees),
        "highest_salary": highest_salary(employees),
        "top_earners": top_earner_names(employees),
    }
    if search is not None:
        report["search"] = {
            "query": search,
            "matches": [e.model_dump(mode="json") for e in search_by_name(employees, search)],
        }
    return report


def format_report(report: dict[str, Any]) -> str:
    lines = [
        f"Employees:       {report['employee_count']}",
        f"Highest salary:  {report['highest_salary'] or 'n/a'}",
        "Top earners:",
    ]
    if report["top_earners"]:
        lines.extend(f"  {i}. {name}" for i, name in enumerate(report["top_earners"], start=1))
    else:
        lines.append("  (none)")

    search = report.get("search")
    if search is not None:
        lines.append(f"Matches for '{search['query']}': {len(search['matches'])}")
        lines.extend(f"  - {m['id']} {m['name']} ({m['salary']})" for m in search["matches"])
    return "\n".join(lines)


async def run(args: argparse.Namespace) -> dict[str, Any]:
    settings = Settings()
    gateway = EmployeeGateway()
    await gateway.initialize(settings)
    if not gateway.initialized:
        logger.error("EMPLOYEE_API_BASE_URL not set — nothing to report")
        sys.exit(1)

    try:
        employees = await gateway.list_all()
    finally:
        await gateway.close()

    if not employees:
        logger.warning("No employees returned by %s", settings.EMPLOYEE_API_BASE_URL)
    return build_report(employees, args.search)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    report = asyncio.run(run(args))
    print(json.dumps(report, indent=2) if args.json else format_report(report))


if __name__ == "__main__":
    main()
