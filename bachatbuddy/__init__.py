"""Desktop expense tracker: storage, sorting, monthly category totals and themes."""

__version__ = "0.1.0"