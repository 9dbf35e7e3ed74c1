"""Grouping, partitioning and ranking queries over Employee records."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from statistics import fmean
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


@dataclass(frozen=True)
class Employee:
    """An employee with a department, salary and optional skills."""

    name: str
    department: str
    salary: int
    skills: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        """Render name, department and salary."""
        return (
            f"Employee(name='{self.name}', department='{self.department}', "
            f"salary={self.salary})"
        )


def _group_by_department(employees: Iterable[Employee]) -> dict[str, list[Employee]]:
    grouped: dict[str, list[Employee]] = {}
    for employee in employees:
        grouped.setdefault(employee.department, []).append(employee)
    return grouped


def _distinct_salaries_desc(employees: Iterable[Employee]) -> list[int]:
    return sorted({employee.salary for employee in employees}, reverse=True)


def group_and_count_by_department(employees: Iterable[Employee]) -> dict[str, int]:
    """Count employees per department."""
    return dict(Counter(employee.department for employee in employees))


def find_top_n_salaries(employees: Iterable[Employee], n: int) -> list[int]:
    """Return up to n distinct salaries, highest first.

    Args:
        employees: Employees to rank.
        n: Maximum number of salaries to return.

    Returns:
        Distinct salaries in descending order.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        msg = f"n must be non-negative, got {n}"
        raise ValueError(msg)
    return _distinct_salaries_desc(employees)[:n]


def partition_by_salary_threshold(
    employees: Iterable[Employee], threshold: int
) -> dict[bool, list[Employee]]:
    """Split employees on ``salary > threshold``. Both keys are always present."""
    partitioned: dict[bool, list[Employee]] = {True: [], False: []}
    for employee in employees:
        partitioned[employee.salary > threshold].append(employee)
    return partitioned


def calculate_average_salary_by_department(
    employees: Iterable[Employee],
) -> dict[str, float]:
    """Average salary per department."""
    return {
        department: fmean(member.salary for member in members)
        for department, members in _group_by_department(employees).items()
    }


def extract_unique_skills(employees: Iterable[Employee]) -> set[str]:
    """Collect every skill held by at least one employee."""
    return {skill for employee in employees for skill in employee.skills}


def find_employees_in_salary_range(
    employees: Iterable[Employee], low: int, high: int
) -> list[str]:
    """Return names of employees earning between low and high, inclusive."""
    return [
        employee.name for employee in employees if low <= employee.salary <= high
    ]


def join_names_by_department(
    employees: Iterable[Employee], delimiter: str
) -> dict[str, str]:
    """Join employee names per department with delimiter, in input order."""
    return {
        department: delimiter.join(member.name for member in members)
        for department, members in _group_by_department(employees).items()
    }


def find_second_highest_salary(employees: Iterable[Employee]) -> int | None:
    """Return the second highest distinct salary, or None if there is none."""
    salaries = _distinct_salaries_desc(employees)
    return salaries[1] if len(salaries) > 1 else None


def convert_to_map_by_name(employees: Iterable[Employee]) -> dict[str, Employee]:
    """Map each name to the first employee carrying it."""
    by_name: dict[str, Employee] = {}
    for employee in employees:
        by_name.setdefault(employee.name, employee)
    return by_name


def find_employees_by_name_prefix(
    employees: Sequence[Employee], prefix: str
) -> list[Employee]:
    """Return employees whose name starts with prefix (case-sensitive)."""
    return [employee for employee in employees if employee.name.startswith(prefix)]
