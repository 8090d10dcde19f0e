# bachatbuddy

A small desktop expense tracker. Record what you spent, put it in a category,
sort the list and see how much went to each category in each month.

## Installing

```
pip install .
```

The window uses Tkinter, which ships with most Python installations. There
are no other dependencies.

## Running

```
bachatbuddy
bachatbuddy --storage path/to/expenses.txt
```

Expenses are stored in `expense.txt` in the current directory unless
`-s PATH` / `--storage PATH` names another file. The file is read when the
window opens and written when it is closed. Run `bachatbuddy --help` to see
the options.

The window asks for the "Brass Mono" font and tries to load an icon from
`resources/logo.ico` relative to the current directory. Neither is shipped
with the package: without the font Tk picks a fallback, and a missing icon
only logs a warning.

## Using the window

- Fill in **Description**, **Category**, **Amount** and **Date**, then press
  **Add** or Enter in any field. All four fields are required. The date
  starts as today's date and must be written as `YYYY-MM-DD`. A category
  typed into the form is added to the category drop-down, even if the
  expense itself is refused for a missing field.
- Select a row and press Delete to remove it.
- **Clear** removes every expense after asking you to confirm.
- Click the **Category**, **Amount** or **Date** column heading to sort by it;
  each further click on the same heading reverses the order. Two amounts are
  compared as numbers when both begin with a number, otherwise as text. The
  **Description** heading does not sort.
- Column widths follow the width of the table when the window is resized.
- **View Monthly Category Totals** opens a window listing, for each month
  (the first seven characters of the date, `YYYY-MM`), the sum of the amounts
  in each category, to two decimal places. Amounts that do not begin with a
  number are left out.
- **Toggle** switches between the themes. The window opens in the dark
  theme, and the first press keeps it dark; after that each press swaps
  between light and dark.

## Storage format

The first line holds the number of expenses. Each following line holds one
expense as four space-separated fields: description, category, amount and
date. Spaces inside the description and category are written as underscores
and turned back into spaces when loaded (so underscores typed by the user
also come back as spaces). A missing file, or one whose first field is not a
number, loads as an empty list; records cut short at the end of the file are
filled with empty fields.

## Using it as a library

```python
from bachatbuddy.expense import Expense, save_expenses, load_expenses
from bachatbuddy.ledger import ExpenseBook, Column, monthly_totals, format_totals

book = ExpenseBook(load_expenses("expense.txt"))
book.add("Lunch with team", "Food", "12.50", "2024-03-14")
book.sort_by_column(Column.AMOUNT)
print(format_totals(monthly_totals(book)))
save_expenses(book, "expense.txt")
```

- `bachatbuddy.expense`: the `Expense` dataclass, `save_expenses` and
  `load_expenses`.
- `bachatbuddy.ledger`: `ExpenseBook` (`add`, `delete`, `clear`,
  `sort_by_column`, `remember_category`), `sort_expenses`, `monthly_totals`,
  `format_totals` and `column_widths`. `add` raises `MissingFieldError` when a
  field is empty, `delete` raises `NoSelectionError` for an index that names
  no expense, and `clear` raises `LookupError` when the book is empty.
- `bachatbuddy.theme`: the grayscale `Palette` (with `Palette.hex()`), the
  `Theme` dataclass and `theme_for(dark)`.
- `bachatbuddy.app`: the Tk window `ExpenseApp`, `parse_args` and `main`.

## Running the tests

```
pip install .[test]
pytest
```