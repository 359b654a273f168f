"""Domain value objects.

Immutable value objects that enforce their own invariants.
"""

from src.domain.value_objects.page_window import PageWindow

__all__ = [
    "PageWindow",
]
