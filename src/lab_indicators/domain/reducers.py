"""Reduktionsfunktionen: Zeitreihe Jahr -> Wert auf einen Einzelwert abbilden.

Reine Funktionen ohne IO.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

Reducer = Callable[[Mapping[int, float]], float]


def sum_values(series: Mapping[int, float]) -> float:
    """Summe aller vorhandenen Jahreswerte. Leere Reihe -> 0."""
    return sum(series.values(), 0)


def average_values(series: Mapping[int, float]) -> float:
    """
    Arithmetisches Mittel ueber die vorhandenen Jahre.

    Fehlende Jahre zaehlen nicht mit. Eine leere Reihe ergibt 0.0 (nicht NaN),
    damit Dashboards auch Organisationen ohne Daten anzeigen koennen.
    """
    if not series:
        return 0.0
    return sum(series.values()) / len(series)
