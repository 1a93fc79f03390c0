"""Filter auf ein inklusives Jahresfenster [start_year, end_year]."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def filter_by_year_window(
    items: Iterable[T],
    year_of: Callable[[T], int | None],
    start_year: int,
    end_year: int,
) -> Iterator[T]:
    """Elemente liefern, deren Jahr im Fenster liegt (beide Grenzen inklusiv).

    Elemente ohne Jahr (None) werden ausgeschlossen. Fehler aus `year_of`
    werden nicht abgefangen.
    """
    for item in items:
        year = year_of(item)
        if year is not None and start_year <= year <= end_year:
            yield item
