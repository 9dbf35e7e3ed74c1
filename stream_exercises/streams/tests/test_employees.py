"""Tests for streams.employees module."""

from __future__ import annotations

import pytest

from stream_exercises.streams.employees import (
    Employee,
    calculate_average_salary_by_department,
    convert_to_map_by_name,
    extract_unique_skills,
    find_employees_by_name_prefix,
    find_employees_in_salary_range,
    find_second_highest_salary,
    find_top_n_salaries,
    group_and_count_by_department,
    join_names_by_department,
    partition_by_salary_threshold,
)


@pytest.fixture
def staff() -> list[Employee]:
    """Five employees across three departments."""
    return [
        Employee("Alice", "Engineering", 75000),
        Employee("Bob", "Engineering", 95000),
        Employee("Charlie", "Sales", 60000),
        Employee("Diana", "Sales", 85000),
        Employee("Eve", "HR", 55000),
    ]


class TestEmployee:
    """Tests for the Employee record."""

    def test_str(self) -> None:
        """Test the string form."""
        employee = Employee("Alice", "Engineering", 75000, ("Java",))
        assert str(employee) == (
            "Employee(name='Alice', department='Engineering', salary=75000)"
        )

    def test_skills_default_empty(self) -> None:
        """Test that skills default to an empty tuple."""
        assert Employee("Eve", "HR", 1).skills == ()


class TestGrouping:
    """Tests for department grouping queries."""

    def test_group_and_count(self, staff: list[Employee]) -> None:
        """Test counting employees per department."""
        assert group_and_count_by_department(staff) == {
            "Engineering": 2,
            "Sales": 2,
            "HR": 1,
        }

    def test_average_salary(self) -> None:
        """Test averaging salaries per department."""
        employees = [
            Employee("Alice", "Engineering", 80000),
            Employee("Bob", "Engineering", 90000),
            Employee("Charlie", "Sales", 60000),
            Employee("Diana", "Sales", 70000),
            Employee("Eve", "HR", 55000),
        ]
        averages = calculate_average_salary_by_department(employees)
        assert averages["Engineering"] == pytest.approx(85000.0)
        assert averages["Sales"] == pytest.approx(65000.0)
        assert averages["HR"] == pytest.approx(55000.0)

    def test_join_names(self, staff: list[Employee]) -> None:
        """Test joining names with a delimiter."""
        joined = join_names_by_department(staff, " | ")
        assert joined == {
            "Engineering": "Alice | Bob",
            "Sales": "Charlie | Diana",
            "HR": "Eve",
        }


class TestSalaries:
    """Tests for salary ranking and filtering."""

    def test_top_n(self, staff: list[Employee]) -> None:
        """Test the top three salaries."""
        assert find_top_n_salaries(staff, 3) == [95000, 85000, 75000]

    def test_top_n_larger_than_list(self, staff: list[Employee]) -> None:
        """Test asking for more salaries than exist."""
        assert len(find_top_n_salaries(staff, 10)) == 5

    def test_top_n_distinct(self) -> None:
        """Test that duplicate salaries are counted once."""
        employees = [Employee("A", "X", 10), Employee("B", "X", 10)]
        assert find_top_n_salaries(employees, 2) == [10]

    def test_top_n_negative_raises(self, staff: list[Employee]) -> None:
        """Test that a negative n is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            find_top_n_salaries(staff, -1)

    def test_partition(self, staff: list[Employee]) -> None:
        """Test splitting on a salary threshold."""
        partitioned = partition_by_salary_threshold(staff, 70000)
        assert [e.name for e in partitioned[True]] == ["Alice", "Bob", "Diana"]
        assert [e.name for e in partitioned[False]] == ["Charlie", "Eve"]

    def test_partition_empty(self) -> None:
        """Test that both keys exist for an empty input."""
        assert partition_by_salary_threshold([], 0) == {True: [], False: []}

    def test_salary_range_inclusive(self, staff: list[Employee]) -> None:
        """Test that both bounds are inclusive."""
        assert find_employees_in_salary_range(staff, 75000, 85000) == [
            "Alice",
            "Diana",
        ]

    def test_second_highest_with_duplicates(self) -> None:
        """Test that a shared top salary is skipped once."""
        employees = [
            Employee("Alice", "Engineering", 75000),
            Employee("Bob", "Engineering", 95000),
            Employee("Diana", "Sales", 95000),
            Employee("Eve", "HR", 85000),
        ]
        assert find_second_highest_salary(employees) == 85000

    def test_second_highest_missing(self) -> None:
        """Test that a single distinct salary has no second highest."""
        assert find_second_highest_salary([Employee("A", "X", 1)]) is None


class TestLookups:
    """Tests for skill and name lookups."""

    def test_unique_skills(self) -> None:
        """Test collecting distinct skills."""
        employees = [
            Employee("Alice", "Engineering", 75000, ("Java", "Python", "SQL")),
            Employee("Bob", "Engineering", 80000, ("Java", "Go")),
            Employee("Charlie", "Sales", 60000, ("Negotiation", "Excel")),
            Employee("Diana", "Engineering", 85000, ("Python", "Kubernetes")),
        ]
        assert extract_unique_skills(employees) == {
            "Java",
            "Python",
            "SQL",
            "Go",
            "Negotiation",
            "Excel",
            "Kubernetes",
        }

    def test_map_by_name_keeps_first(self) -> None:
        """Test that the first employee with a name wins."""
        first = Employee("Alice", "Engineering", 1)
        second = Employee("Alice", "Sales", 2)
        assert convert_to_map_by_name([first, second]) == {"Alice": first}

    def test_name_prefix(self, staff: list[Employee]) -> None:
        """Test filtering by name prefix, case-sensitively."""
        result = find_employees_by_name_prefix(staff, "D")
        assert [e.name for e in result] == ["Diana"]
        assert find_employees_by_name_prefix(staff, "d") == []
