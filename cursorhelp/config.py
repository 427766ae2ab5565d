"""Gestion centralisée de la configuration de l'application."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_LOGIN_DELAY = 1.5
DEFAULT_MIN_PASSWORD_LENGTH = 6
DEFAULT_PROGRESS_STEPS = 30
DEFAULT_THEME = "dark"
DEFAULT_PROFILE_BIO = "Passionné de code et d'open source. Toujours prêt à apprendre."
_THEMES = ("dark", "light")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(RuntimeError):
    """Erreur levée lorsque la configuration est invalide."""


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Paramètres de l'écran de connexion simulé."""

    login_delay: float = DEFAULT_LOGIN_DELAY
    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH
    progress_steps: int = DEFAULT_PROGRESS_STEPS
    theme: str = DEFAULT_THEME
    log_level: str = "INFO"
    profile_bio: str = DEFAULT_PROFILE_BIO
    profile_avatar: str | None = None


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} doit être un nombre (reçu : {raw!r}).") from exc
    if value < 0:
        raise ConfigError(f"{name} ne peut pas être négatif (reçu : {raw!r}).")
    return value


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} doit être un entier (reçu : {raw!r}).") from exc
    if value < 1:
        raise ConfigError(f"{name} doit être supérieur ou égal à 1 (reçu : {raw!r}).")
    return value


def _read_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    value = os.getenv(name, default).strip()
    canonical = {choice.lower(): choice for choice in choices}
    normalized = canonical.get(value.lower())
    if normalized is None:
        raise ConfigError(
            f"{name} doit valoir l'une des options {', '.join(choices)} (reçu : {value!r})."
        )
    return normalized


def load_config() -> AppConfig:
    """Charge la configuration depuis l'environnement (et un éventuel fichier .env)."""
    load_dotenv()

    avatar = os.getenv("CURSORHELP_PROFILE_AVATAR", "").strip() or None

    return AppConfig(
        login_delay=_read_float("CURSORHELP_LOGIN_DELAY", DEFAULT_LOGIN_DELAY),
        min_password_length=_read_int(
            "CURSORHELP_MIN_PASSWORD_LENGTH", DEFAULT_MIN_PASSWORD_LENGTH
        ),
        progress_steps=_read_int("CURSORHELP_PROGRESS_STEPS", DEFAULT_PROGRESS_STEPS),
        theme=_read_choice("CURSORHELP_THEME", DEFAULT_THEME, _THEMES),
        log_level=_read_choice("CURSORHELP_LOG_LEVEL", "INFO", _LOG_LEVELS),
        profile_bio=os.getenv("CURSORHELP_PROFILE_BIO", DEFAULT_PROFILE_BIO),
        profile_avatar=avatar,
    )
