"""The expense tracker window and its command-line entry point."""

from __future__ import annotations

import argparse
import datetime
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence, Union

from bachatbuddy.expense import load_expenses, save_expenses
from bachatbuddy.ledger import (
    Column,
    ExpenseBook,
    MissingFieldError,
    NoSelectionError,
    column_widths,
    format_totals,
    monthly_totals,
)
from bachatbuddy.theme import HOVER_BACKGROUND, REST_BACKGROUND, Theme, theme_for

if TYPE_CHECKING:
    import tkinter as tk

log = logging.getLogger(__name__)

TITLE = "BachatBuddy"
DEFAULT_STORAGE = "expense.txt"
ICON_PATH = Path("resources/logo.ico")
FONT_FAMILY = "Brass Mono"

_HEADINGS = {
    Column.DESCRIPTION: "Description",
    Column.CATEGORY: "Category",
    Column.AMOUNT: "Amount",
    Column.DATE: "Date",
}
_INITIAL_WIDTHS = (250, 170, 170, 170)


class ExpenseApp:
    """The main window: an input form, the expense table and its buttons."""

    def __init__(self, root: "tk.Tk", storage_path: Union[str, Path] = DEFAULT_STORAGE) -> None:
        self.root = root
        self.storage_path = Path(storage_path)
        self.book = ExpenseBook(load_expenses(self.storage_path))
        # The window opens in the dark theme while the flag reads light,
        # so the first toggle keeps it dark.
        self.dark = False
        self._build()
        self._apply_theme(theme_for(True))
        self._refresh()

    # -- construction -----------------------------------------------------

    def _build(self) -> None:
        import tkinter as tk
        from tkinter import ttk

        root = self.root
        root.title(TITLE)
        root.minsize(800, 600)
        root.geometry("800x600")
        try:
            root.iconbitmap(str(ICON_PATH))
        except tk.TclError:
            log.warning("Could not load icon file!")

        body_font = (FONT_FAMILY, 12)
        self._style = ttk.Style(root)
        self._style.theme_use("clam")

        self.panel = tk.Frame(root, padx=10, pady=10)
        self.panel.pack(fill="both", expand=True)

        self.header = tk.Label(
            self.panel, text=TITLE, font=(FONT_FAMILY, 22, "bold"), pady=6
        )
        self.header.pack(fill="x", pady=(0, 10))

        self.input_box = tk.LabelFrame(
            self.panel, text="Add New Expense", font=body_font, padx=5, pady=5
        )
        self.input_box.pack(fill="x", pady=(0, 10))
        for column in (0, 1):
            self.input_box.columnconfigure(column, weight=1)

        self.description = tk.StringVar(master=root)
        self.category = tk.StringVar(master=root)
        self.amount = tk.StringVar(master=root)
        self.date = tk.StringVar(master=root, value=datetime.date.today().isoformat())

        self._labels: list[tk.Label] = []
        self._entries: list[tk.Entry] = []
        form = (
            ("Description", self.description, 0, 0),
            ("Category", self.category, 0, 1),
            ("Amount", self.amount, 2, 0),
            ("Date", self.date, 2, 1),
        )
        for text, variable, row, column in form:
            label = tk.Label(self.input_box, text=text, font=body_font, anchor="w")
            label.grid(row=row, column=column, sticky="w", padx=5, pady=(5, 0))
            self._labels.append(label)
            if variable is self.category:
                widget = ttk.Combobox(
                    self.input_box,
                    textvariable=variable,
                    values=tuple(self.book.categories),
                    font=body_font,
                )
                self.category_input = widget
            else:
                widget = tk.Entry(
                    self.input_box, textvariable=variable, font=body_font, relief="flat"
                )
                self._entries.append(widget)
            widget.grid(row=row + 1, column=column, sticky="ew", padx=5, pady=(0, 5))
            widget.bind("<Return>", lambda _event: self.add_from_input())

        self.add_button = tk.Button(
            self.input_box, text="Add", width=10, relief="flat", command=self.add_from_input
        )
        self.add_button.grid(row=3, column=2, sticky="s", padx=(10, 5), pady=(0, 5))

        self.table = ttk.Treeview(
            self.panel,
            columns=[column.name.lower() for column in Column],
            show="headings",
            selectmode="browse",
        )
        for column, width in zip(Column, _INITIAL_WIDTHS):
            name = column.name.lower()
            self.table.heading(
                name, text=_HEADINGS[column], command=lambda c=column: self._sort_by(c)
            )
            self.table.column(name, anchor="center", width=width)
        self.table.pack(fill="both", expand=True, pady=(0, 10))
        self.table.bind("<Configure>", self._on_table_resize)
        self.table.bind("<Delete>", lambda _event: self.delete_selected())

        self.bottom = tk.Frame(self.panel)
        self.bottom.pack(fill="x")
        self.toggle_button = tk.Button(
            self.bottom,
            text="Toggle",
            font=(FONT_FAMILY, 9, "bold"),
            width=10,
            relief="flat",
            command=self.toggle_theme,
        )
        self.toggle_button.pack(side="left", padx=(0, 10))
        self.totals_button = tk.Button(
            self.bottom,
            text="View Monthly Category Totals",
            relief="flat",
            command=self.show_totals,
        )
        self.totals_button.pack(side="left")
        self.clear_button = tk.Button(
            self.bottom, text="Clear", width=10, relief="flat", command=self.clear_all
        )
        self.clear_button.pack(side="right")

        for button in (self.toggle_button, self.clear_button, self.add_button):
            button.bind(
                "<Enter>", lambda event: event.widget.configure(bg=HOVER_BACKGROUND.hex())
            )
            button.bind(
                "<Leave>", lambda event: event.widget.configure(bg=REST_BACKGROUND.hex())
            )

        root.protocol("WM_DELETE_WINDOW", self._on_close)

    def _apply_theme(self, theme: Theme) -> None:
        panel = theme.panel_bg.hex()
        self.panel.configure(bg=panel)
        self.bottom.configure(bg=panel)
        self.input_box.configure(bg=panel, fg=theme.box_fg.hex())
        self.header.configure(bg=theme.header_bg.hex(), fg=theme.header_fg.hex())
        for label in self._labels:
            label.configure(bg=panel, fg=theme.label_fg.hex())
        for entry in self._entries:
            entry.configure(
                bg=theme.input_bg.hex(),
                fg=theme.input_fg.hex(),
                insertbackground=theme.input_fg.hex(),
            )
        self._style.configure(
            "TCombobox",
            fieldbackground=theme.input_bg.hex(),
            foreground=theme.input_fg.hex(),
        )
        for button in (self.add_button, self.clear_button, self.totals_button):
            button.configure(
                bg=theme.button_bg.hex(),
                fg=theme.button_fg.hex(),
                activebackground=HOVER_BACKGROUND.hex(),
                activeforeground=theme.button_fg.hex(),
            )
        self.toggle_button.configure(
            bg=theme.toggle_bg.hex(),
            fg=theme.toggle_fg.hex(),
            activebackground=HOVER_BACKGROUND.hex(),
            activeforeground=theme.toggle_fg.hex(),
        )
        self._style.configure(
            "Treeview",
            background=theme.list_bg.hex(),
            fieldbackground=theme.list_bg.hex(),
            foreground=theme.list_fg.hex(),
        )

    # -- table ------------------------------------------------------------

    def _refresh(self) -> None:
        self.table.delete(*self.table.get_children())
        for expense in self.book:
            self.table.insert(
                "",
                "end",
                values=(expense.description, expense.category, expense.amount, expense.date),
            )
        self.category_input.configure(values=tuple(self.book.categories))

    def _sort_by(self, column: Column) -> None:
        if self.book.sort_by_column(column):
            self._refresh()

    def _on_table_resize(self, event) -> None:
        for column, width in zip(Column, column_widths(event.width)):
            self.table.column(column.name.lower(), width=width)

    def _on_close(self) -> None:
        self.save()
        self.root.destroy()

    def _inform(self, message: str) -> None:
        from tkinter import messagebox

        messagebox.showinfo(TITLE, message, parent=self.root)

    # -- actions ----------------------------------------------------------

    def add_from_input(self) -> bool:
        """Add the expense typed into the form; report whether one was added."""
        category = self.category.get()
        if self.book.remember_category(category):
            self.category_input.configure(values=tuple(self.book.categories))

        raw_date = self.date.get().strip()
        if raw_date:
            try:
                raw_date = datetime.date.fromisoformat(raw_date).isoformat()
            except ValueError:
                self._inform("Please enter the date as YYYY-MM-DD.")
                return False

        try:
            self.book.add(self.description.get(), category, self.amount.get(), raw_date)
        except MissingFieldError as error:
            self._inform(str(error))
            return False

        self._refresh()
        self.description.set("")
        self.category.set("")
        self.amount.set("")
        return True

    def delete_selected(self) -> bool:
        """Delete the selected row; report whether one was deleted."""
        selection = self.table.selection()
        index: Optional[int] = self.table.index(selection[0]) if selection else None
        try:
            self.book.delete(index)
        except NoSelectionError as error:
            self._inform(str(error))
            return False
        self._refresh()
        return True

    def clear_all(self) -> bool:
        """Ask for confirmation, then remove every expense."""
        from tkinter import messagebox

        if not len(self.book):
            self._inform("There are no expenses!")
            return False
        answer = messagebox.askyesnocancel(
            "Clear", "Are you sure you want to clear all expenses?", parent=self.root
        )
        if not answer:
            return False
        self.book.clear()
        self._refresh()
        return True

    def toggle_theme(self) -> bool:
        """Flip between the themes and return whether the dark one is now chosen."""
        self.dark = not self.dark
        self._apply_theme(theme_for(self.dark))
        return self.dark

    def show_totals(self) -> "tk.Toplevel":
        """Open a window listing per-month category totals."""
        import tkinter as tk

        window = tk.Toplevel(self.root)
        window.title("Monthly Category Totals")
        window.geometry("900x600")
        window.minsize(600, 400)
        text = tk.Text(window, wrap="none")
        text.insert("1.0", format_totals(monthly_totals(self.book)))
        text.configure(state="disabled")
        text.pack(fill="both", expand=True, padx=10, pady=10)
        window.transient(self.root)
        window.grab_set()
        return window

    def save(self) -> None:
        """Write the current expenses to the storage file."""
        save_expenses(self.book, self.storage_path)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="bachatbuddy", description="Keep track of everyday expenses."
    )
    parser.add_argument(
        "-s",
        "--storage",
        default=DEFAULT_STORAGE,
        metavar="PATH",
        help=f"file the expenses are loaded from and saved to (default: {DEFAULT_STORAGE})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the expense window and run until it is closed."""
    args = parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    ExpenseApp(root, args.storage)
    root.mainloop()
    return 0