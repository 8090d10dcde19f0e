import pytest

from bachatbuddy.expense import Expense
from bachatbuddy.ledger import (
    MIN_WIDTHS,
    Column,
    ExpenseBook,
    MissingFieldError,
    NoSelectionError,
    column_widths,
    format_totals,
    monthly_totals,
    sort_expenses,
)


def _expense(amount="1", category="Food", date="2024-01-01", description="item"):
    return Expense(description, category, amount, date)


def test_add_appends_expense():
    book = ExpenseBook()
    added = book.add("Tea", "Drinks", "3", "2024-02-02")
    assert list(book) == [added]
    assert book.categories == ["Drinks"]


@pytest.mark.parametrize(
    "fields",
    [
        ("", "Drinks", "3", "2024-02-02"),
        ("Tea", "", "3", "2024-02-02"),
        ("Tea", "Drinks", "", "2024-02-02"),
        ("Tea", "Drinks", "3", ""),
    ],
)
def test_add_with_empty_field_raises(fields):
    book = ExpenseBook()
    with pytest.raises(MissingFieldError):
        book.add(*fields)
    assert len(book) == 0


def test_category_remembered_even_when_add_fails():
    book = ExpenseBook()
    with pytest.raises(MissingFieldError):
        book.add("", "Rent", "", "2024-02-02")
    assert book.categories == ["Rent"]


def test_remember_category_is_unique():
    book = ExpenseBook()
    assert book.remember_category("Food") is True
    assert book.remember_category("Food") is False
    assert book.remember_category("") is False
    assert book.categories == ["Food"]


def test_init_collects_categories_in_order():
    book = ExpenseBook([_expense(category="B"), _expense(category="A"), _expense(category="B")])
    assert book.categories == ["B", "A"]
    assert len(book) == 3


def test_delete_removes_given_row():
    first, second = _expense(description="one"), _expense(description="two")
    book = ExpenseBook([first, second])
    assert book.delete(0) == first
    assert list(book) == [second]


@pytest.mark.parametrize("index", [None, -1, 5])
def test_delete_without_valid_selection_raises(index):
    book = ExpenseBook([_expense()])
    with pytest.raises(NoSelectionError):
        book.delete(index)
    assert len(book) == 1


def test_clear_empties_book():
    book = ExpenseBook([_expense(), _expense()])
    assert book.clear() == 2
    assert len(book) == 0


def test_clear_empty_book_raises():
    with pytest.raises(LookupError):
        ExpenseBook().clear()


def test_sort_amount_numeric():
    expenses = [_expense("10"), _expense("9"), _expense("100")]
    ordered = sort_expenses(expenses, Column.AMOUNT, True)
    assert [e.amount for e in ordered] == ["9", "10", "100"]
    descending = sort_expenses(expenses, Column.AMOUNT, False)
    assert [e.amount for e in descending] == ["100", "10", "9"]


def test_sort_amount_falls_back_to_text():
    ordered = sort_expenses([_expense("b"), _expense("a")], Column.AMOUNT, True)
    assert [e.amount for e in ordered] == ["a", "b"]


def test_sort_description_keeps_order():
    expenses = [_expense(description="z"), _expense(description="a")]
    assert sort_expenses(expenses, Column.DESCRIPTION, True) == expenses


def test_sort_by_column_toggles_direction():
    book = ExpenseBook([_expense(date="2024-02-01"), _expense(date="2024-01-01"), _expense(date="2024-03-01")])
    assert book.sort_by_column(Column.DATE) is True
    first = [e.date for e in book]
    assert first == sorted(first)
    book.sort_by_column(Column.DATE)
    second = [e.date for e in book]
    assert second == sorted(second, reverse=True)


def test_sort_by_category_is_independent_of_date():
    book = ExpenseBook([_expense(category="B"), _expense(category="A")])
    book.sort_by_column(Column.DATE)
    book.sort_by_column(Column.CATEGORY)
    assert [e.category for e in book] == ["A", "B"]


def test_sort_by_description_column_does_nothing():
    book = ExpenseBook([_expense(description="z"), _expense(description="a")])
    assert book.sort_by_column(Column.DESCRIPTION) is False
    assert [e.description for e in book] == ["z", "a"]


def test_monthly_totals_groups_and_skips_bad_amounts():
    expenses = [
        _expense("2", "Food", "2024-01-05"),
        _expense("3", "Food", "2024-01-20"),
        _expense("oops", "Food", "2024-01-21"),
        _expense("4", "Rent", "2024-02-01"),
    ]
    totals = monthly_totals(expenses)
    assert list(totals) == ["2024-01", "2024-02"]
    assert totals["2024-01"] == {"Food": 5.0}
    assert totals["2024-02"] == {"Rent": 4.0}


def test_monthly_totals_sorted_keys():
    totals = monthly_totals([_expense(category="B", date="2024-05-01"), _expense(category="A", date="2023-01-01"), _expense(category="C", date="2023-01-02")])
    assert list(totals) == sorted(totals)
    assert list(totals["2023-01"]) == ["A", "C"]


def test_format_totals():
    text = format_totals({"2024-01": {"Food": 12.5}})
    assert text == "Month: 2024-01\n  Food: 12.50\n\n"


def test_format_totals_empty():
    assert format_totals({}) == ""


@pytest.mark.parametrize("width", [0, 101, 300, 449])
def test_column_widths_split_evenly_when_narrow(width):
    widths = column_widths(width)
    assert sum(widths) == width
    assert widths[0] == widths[1] == widths[2]
    assert 0 <= widths[3] - widths[0] < 4