"""Troncature de texte sur un nombre limité de lignes."""

from __future__ import annotations

from typing import Callable

ELLIPSIS = "…"


def _wrap(text: str, fits: Callable[[str], bool]) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if fits(candidate):
            current = candidate
            continue
        if current:
            lines.append(current)
            current = ""
        # Mot trop long pour une ligne entière : découpage par caractère.
        for char in word:
            if current and not fits(current + char):
                lines.append(current)
                current = ""
            current += char
    if current:
        lines.append(current)
    return lines


def ellipsize(text: str, max_lines: int, fits: Callable[[str], bool]) -> list[str]:
    """Répartit ``text`` sur au plus ``max_lines`` lignes.

    ``fits`` indique si une ligne tient dans la largeur disponible. Quand le
    texte déborde, la dernière ligne conservée se termine par « … ».
    """
    if max_lines < 1:
        raise ValueError("max_lines doit être supérieur ou égal à 1")

    lines = _wrap(text, fits)
    if len(lines) <= max_lines:
        return lines

    kept = lines[:max_lines]
    last = kept[-1]
    while last and not fits(last + ELLIPSIS):
        last = last[:-1]
    kept[-1] = last.rstrip() + ELLIPSIS
    return kept
