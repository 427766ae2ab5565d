"""Service d'authentification simulé."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from cursorhelp.config import DEFAULT_LOGIN_DELAY, DEFAULT_MIN_PASSWORD_LENGTH, DEFAULT_PROGRESS_STEPS

INVALID_CREDENTIALS_MESSAGE = (
    "Nom d'utilisateur ou mot de passe invalide (simulation : au moins 6 caractères)."
)

ProgressCallback = Callable[[float], None]

logger = logging.getLogger(__name__)


class AuthenticationError(RuntimeError):
    """Erreur générique levée lors d'une tentative de connexion."""


class AuthenticationRejected(AuthenticationError):
    """Identifiants refusés par le service."""

    def __init__(self, message: str = INVALID_CREDENTIALS_MESSAGE) -> None:
        super().__init__(message)


class MockAuthenticator:
    """Simule un appel distant : attend un délai fixe puis valide les identifiants.

    Le délai est découpé en ``progress_steps`` tranches égales ; après chaque
    tranche, ``on_progress`` reçoit la fraction écoulée (de ``1 / steps`` à 1.0).
    """

    def __init__(
        self,
        *,
        delay: float = DEFAULT_LOGIN_DELAY,
        min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
        progress_steps: int = DEFAULT_PROGRESS_STEPS,
    ) -> None:
        if delay < 0:
            raise ValueError("delay ne peut pas être négatif")
        if min_password_length < 1:
            raise ValueError("min_password_length doit être supérieur ou égal à 1")
        if progress_steps < 1:
            raise ValueError("progress_steps doit être supérieur ou égal à 1")
        self._delay = delay
        self._min_password_length = min_password_length
        self._progress_steps = progress_steps

    @property
    def delay(self) -> float:
        return self._delay

    def is_valid(self, username: str, password: str) -> bool:
        """Règle statique : nom non vide (hors espaces) et mot de passe assez long."""
        return bool(username.strip()) and len(password) >= self._min_password_length

    async def login(
        self,
        username: str,
        password: str,
        on_progress: ProgressCallback | None = None,
    ) -> bool:
        """Attend le délai simulé puis retourne True si les identifiants sont acceptés."""
        step_delay = self._delay / self._progress_steps
        for step in range(1, self._progress_steps + 1):
            await asyncio.sleep(step_delay)
            if on_progress is not None:
                on_progress(step / self._progress_steps)

        accepted = self.is_valid(username, password)
        logger.debug("Identifiants %s pour %r", "acceptés" if accepted else "refusés", username)
        return accepted

    async def authenticate(
        self,
        username: str,
        password: str,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        """Variante de :meth:`login` qui lève :class:`AuthenticationRejected` en cas de refus."""
        if not await self.login(username, password, on_progress):
            raise AuthenticationRejected()
