"""The in-memory expense list: adding, deleting, sorting and totals."""

from __future__ import annotations

import math
import re
from enum import IntEnum
from functools import cmp_to_key
from typing import Callable, Iterable, Iterator, Optional

from bachatbuddy.expense import Expense

MIN_WIDTHS = (150, 100, 100, 100)
_SHARES = (0.35, 0.22, 0.22)

_NUMBER_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class MissingFieldError(ValueError):
    """Raised when an expense is added with an empty field."""

    def __init__(self, message: str = "Please fill in all the fields!") -> None:
        super().__init__(message)


class NoSelectionError(LookupError):
    """Raised when a deletion names no existing expense."""

    def __init__(self, message: str = "No task is selected!") -> None:
        super().__init__(message)


class Column(IntEnum):
    """Columns of the expense table, in display order."""

    DESCRIPTION = 0
    CATEGORY = 1
    AMOUNT = 2
    DATE = 3


def _parse_amount(text: str) -> Optional[float]:
    """Read a leading floating-point number, or None if there is none."""
    match = _NUMBER_PREFIX.match(text.lstrip())
    if match is None:
        return None
    literal = match.group(0)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        return None
    return value


def _compare(a, b) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def _compare_amounts(a: Expense, b: Expense) -> int:
    left, right = _parse_amount(a.amount), _parse_amount(b.amount)
    if left is None or right is None:
        return _compare(a.amount, b.amount)
    return _compare(left, right)


_COMPARATORS: dict[Column, Callable[[Expense, Expense], int]] = {
    Column.CATEGORY: lambda a, b: _compare(a.category, b.category),
    Column.AMOUNT: _compare_amounts,
    Column.DATE: lambda a, b: _compare(a.date, b.date),
}


def sort_expenses(expenses: Iterable[Expense], column: Column, ascending: bool) -> list[Expense]:
    """Return the expenses sorted by a category, amount or date column.

    Amounts compare as numbers when both parse, otherwise as text.
    The description column is not sortable and leaves the order as is.
    """
    expenses = list(expenses)
    comparator = _COMPARATORS.get(Column(column))
    if comparator is None:
        return expenses
    if ascending:
        key = cmp_to_key(comparator)
    else:
        key = cmp_to_key(lambda a, b: comparator(b, a))
    return sorted(expenses, key=key)


def monthly_totals(expenses: Iterable[Expense]) -> dict[str, dict[str, float]]:
    """Sum amounts per month (first seven characters of the date) and category.

    Expenses whose amount is not a number are skipped. Months and
    categories come out in sorted order.
    """
    totals: dict[str, dict[str, float]] = {}
    for expense in expenses:
        amount = _parse_amount(expense.amount)
        if amount is None:
            continue
        by_category = totals.setdefault(expense.date[:7], {})
        by_category[expense.category] = by_category.get(expense.category, 0.0) + amount
    return {
        month: dict(sorted(totals[month].items()))
        for month in sorted(totals)
    }


def format_totals(totals: dict[str, dict[str, float]]) -> str:
    """Render monthly totals as the text shown in the totals window."""
    lines = []
    for month in sorted(totals):
        lines.append(f"Month: {month}\n")
        for category in sorted(totals[month]):
            lines.append(f"  {category}: {totals[month][category]:.2f}\n")
        lines.append("\n")
    return "".join(lines)


def column_widths(total_width: int) -> tuple[int, int, int, int]:
    """Split a table width over the four columns.

    Columns take fixed shares with minimums; when the minimums do not
    fit, the width is split evenly and the remainder goes to the date.
    """
    if sum(MIN_WIDTHS) > total_width:
        quarter = int(total_width / 4)
        return quarter, quarter, quarter, quarter + total_width - quarter * 4

    desc, cat, amount = (
        max(int(total_width * share), minimum)
        for share, minimum in zip(_SHARES, MIN_WIDTHS)
    )
    date = max(total_width - (desc + cat + amount), MIN_WIDTHS[3])
    date += total_width - (desc + cat + amount + date)
    return desc, cat, amount, date


class ExpenseBook:
    """The list of expenses shown in the table, with its known categories."""

    def __init__(self, expenses: Optional[Iterable[Expense]] = None) -> None:
        self.expenses: list[Expense] = []
        self.categories: list[str] = []
        self._ascending = {column: True for column in _COMPARATORS}
        for expense in expenses or ():
            self.expenses.append(expense)
            self.remember_category(expense.category)

    def __len__(self) -> int:
        return len(self.expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(self.expenses)

    def __getitem__(self, index: int) -> Expense:
        return self.expenses[index]

    def remember_category(self, category: str) -> bool:
        """Record a non-empty category not seen before; report whether it was new."""
        if not category or category in self.categories:
            return False
        self.categories.append(category)
        return True

    def add(self, description: str, category: str, amount: str, date: str) -> Expense:
        """Append an expense; every field must be filled in.

        The category is remembered even when another field is missing.
        """
        self.remember_category(category)
        if not (description and category and amount and date):
            raise MissingFieldError()
        expense = Expense(description, category, amount, date)
        self.expenses.append(expense)
        return expense

    def delete(self, index: Optional[int]) -> Expense:
        """Remove and return the expense at *index*."""
        if index is None or not 0 <= index < len(self.expenses):
            raise NoSelectionError()
        return self.expenses.pop(index)

    def clear(self) -> int:
        """Remove every expense and return how many there were."""
        if not self.expenses:
            raise LookupError("There are no expenses!")
        count = len(self.expenses)
        self.expenses.clear()
        return count

    def sort_by_column(self, column: Column) -> bool:
        """Sort by a column, alternating direction on each call for that column.

        Returns False, leaving the order alone, for an unsortable column.
        """
        column = Column(column)
        if column not in self._ascending:
            return False
        self.expenses = sort_expenses(self.expenses, column, self._ascending[column])
        self._ascending[column] = not self._ascending[column]
        return True