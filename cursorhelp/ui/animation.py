"""Courbe de l'animation de secousse jouée lors d'une erreur de connexion."""

from __future__ import annotations

# (instant en ms, décalage horizontal en px)
SHAKE_KEYFRAMES: tuple[tuple[int, float], ...] = (
    (0, 0.0),
    (70, -14.0),
    (140, 14.0),
    (210, -14.0),
    (280, 14.0),
    (350, -7.0),
    (420, 0.0),
)
SHAKE_DURATION_MS = SHAKE_KEYFRAMES[-1][0]
SHAKE_FRAME_MS = 16


def shake_offset(elapsed_ms: float) -> float:
    """Décalage à l'instant donné, par interpolation linéaire entre images clés."""
    if elapsed_ms <= 0 or elapsed_ms >= SHAKE_DURATION_MS:
        return 0.0

    for (start, start_value), (end, end_value) in zip(SHAKE_KEYFRAMES, SHAKE_KEYFRAMES[1:]):
        if start <= elapsed_ms <= end:
            ratio = (elapsed_ms - start) / (end - start)
            return start_value + (end_value - start_value) * ratio
    return 0.0


def shake_frames(frame_ms: int = SHAKE_FRAME_MS) -> list[int]:
    """Décalages arrondis à appliquer à chaque image, le dernier valant toujours 0."""
    if frame_ms < 1:
        raise ValueError("frame_ms doit être supérieur ou égal à 1")
    offsets = [round(shake_offset(t)) for t in range(0, SHAKE_DURATION_MS, frame_ms)]
    offsets.append(0)
    return offsets
