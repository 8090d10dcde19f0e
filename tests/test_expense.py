from pathlib import Path

from bachatbuddy.expense import Expense, load_expenses, save_expenses


def test_save_writes_count_and_underscored_fields(tmp_path: Path):
    path = tmp_path / "expense.txt"
    save_expenses([Expense("Lunch at cafe", "Eating out", "12.5", "2024-01-02")], path)
    assert path.read_text(encoding="utf-8") == "1\nLunch_at_cafe Eating_out 12.5 2024-01-02"


def test_save_empty_list_writes_zero(tmp_path: Path):
    path = tmp_path / "expense.txt"
    save_expenses([], path)
    assert path.read_text(encoding="utf-8") == "0"


def test_round_trip(tmp_path: Path):
    path = tmp_path / "expense.txt"
    expenses = [
        Expense("Bus ticket", "Travel", "2.75", "2024-03-01"),
        Expense("Weekly groceries", "Food", "54", "2024-03-04"),
    ]
    save_expenses(expenses, path)
    assert load_expenses(path) == expenses


def test_missing_file_loads_empty(tmp_path: Path):
    assert load_expenses(tmp_path / "nothing.txt") == []


def test_underscores_become_spaces_on_load(tmp_path: Path):
    path = tmp_path / "expense.txt"
    save_expenses([Expense("snake_case", "a_b", "1", "2024-01-01")], path)
    loaded = load_expenses(path)
    assert loaded[0].description == "snake case"
    assert loaded[0].category == "a b"


def test_bad_count_loads_empty(tmp_path: Path):
    path = tmp_path / "expense.txt"
    path.write_text("many\nx y 1 2024-01-01", encoding="utf-8")
    assert load_expenses(path) == []


def test_empty_file_loads_empty(tmp_path: Path):
    path = tmp_path / "expense.txt"
    path.write_text("", encoding="utf-8")
    assert load_expenses(path) == []


def test_truncated_record_gets_empty_fields(tmp_path: Path):
    path = tmp_path / "expense.txt"
    path.write_text("2\nTea Drinks 3 2024-02-02\nCoffee", encoding="utf-8")
    loaded = load_expenses(path)
    assert len(loaded) == 2
    assert loaded[1] == Expense("Coffee", "", "", "")


def test_count_limits_records_read(tmp_path: Path):
    path = tmp_path / "expense.txt"
    path.write_text("1\nTea Drinks 3 2024-02-02\nCoffee Drinks 4 2024-02-03", encoding="utf-8")
    assert load_expenses(path) == [Expense("Tea", "Drinks", "3", "2024-02-02")]