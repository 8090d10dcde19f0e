"""Expense records and their plain-text storage format."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, Path]

_FIELD_COUNT = 4


@dataclass
class Expense:
    """A single expense entry; every field is kept as entered text."""

    description: str
    category: str
    amount: str
    date: str


def _encode(text: str) -> str:
    return text.replace(" ", "_")


def _decode(text: str) -> str:
    return text.replace("_", " ")


def save_expenses(expenses: Iterable[Expense], path: PathLike) -> None:
    """Write expenses to *path*: a count line, then one record per line.

    Spaces in descriptions and categories are stored as underscores.
    """
    expenses = list(expenses)
    records = [
        " ".join(
            (
                _encode(expense.description),
                _encode(expense.category),
                expense.amount,
                expense.date,
            )
        )
        for expense in expenses
    ]
    Path(path).write_text("\n".join([str(len(expenses)), *records]), encoding="utf-8")


def load_expenses(path: PathLike) -> list[Expense]:
    """Read expenses saved by :func:`save_expenses`.

    A missing file or an unreadable count yields an empty list. Records
    cut short by the end of the file get empty fields.
    """
    file = Path(path)
    if not file.exists():
        return []

    tokens = iter(file.read_text(encoding="utf-8").split())
    try:
        count = int(next(tokens))
    except (StopIteration, ValueError):
        return []

    expenses = []
    for _ in range(max(count, 0)):
        description, category, amount, date = (
            next(tokens, "") for _ in range(_FIELD_COUNT)
        )
        expenses.append(
            Expense(_decode(description), _decode(category), amount, date)
        )
    return expenses