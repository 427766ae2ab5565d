"""View-model de l'écran de connexion."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from cursorhelp.services import (
    INVALID_CREDENTIALS_MESSAGE,
    AuthenticationRejected,
    MockAuthenticator,
)
from cursorhelp.state import LoginUiState

LOGIN_FAILED_MESSAGE = "Échec de la connexion."
LOGIN_CANCELLED_MESSAGE = "Connexion annulée."

StateCallback = Callable[[LoginUiState], None]

logger = logging.getLogger(__name__)


class LoginViewModel:
    """Détient l'état de l'écran et publie chaque nouvel instantané aux abonnés.

    La couche UI ne modifie jamais l'état directement : elle lit :attr:`state`,
    s'abonne via :meth:`subscribe` et transmet les saisies de l'utilisateur
    aux opérations ci-dessous.

    Les tentatives en cours appartiennent au view-model ; :meth:`close` les
    annule et plus aucun instantané n'est publié ensuite.
    """

    def __init__(
        self,
        authenticator: MockAuthenticator,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._authenticator = authenticator
        self._loop = loop
        self._state = LoginUiState()
        self._subscribers: list[StateCallback] = []
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @property
    def state(self) -> LoginUiState:
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._closed

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """Enregistre un abonné et retourne la fonction de désabonnement."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # ------------------------------------------------------------ Saisie -
    def on_username_change(self, value: str) -> None:
        self._update(username=value, error_message=None)

    def on_password_change(self, value: str) -> None:
        self._update(password=value, error_message=None)

    def clear_error(self) -> None:
        self._update(error_message=None)

    def reset_success(self) -> None:
        self._update(login_success=False)

    # --------------------------------------------------------- Connexion -
    def perform_login(self) -> asyncio.Task | None:
        """Lance une tentative en tâche de fond.

        Retourne la tâche créée, ou None si la demande est ignorée (tentative
        déjà en cours ou view-model fermé).
        """
        if not self._can_start():
            return None

        loop = self._loop or asyncio.get_running_loop()
        self._start_loading()
        task = loop.create_task(self._run_login())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def login(self) -> None:
        """Exécute une tentative complète dans la tâche courante."""
        if not self._can_start():
            return
        task = asyncio.current_task()
        if task is not None:
            self._tasks.add(task)
        try:
            self._start_loading()
            await self._run_login()
        finally:
            self._tasks.discard(task)

    def close(self) -> None:
        """Annule les tentatives en cours ; l'état n'évolue plus ensuite."""
        if self._closed:
            return
        self._closed = True
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            logger.debug("%d tentative(s) de connexion annulée(s) à la fermeture", len(self._tasks))
        self._subscribers.clear()

    # ----------------------------------------------------------- Interne -
    def _can_start(self) -> bool:
        if self._closed:
            logger.debug("Connexion demandée après fermeture : ignorée")
            return False
        if self._state.is_loading:
            logger.debug("Connexion déjà en cours : nouvelle demande ignorée")
            return False
        return True

    def _start_loading(self) -> None:
        self._update(
            is_loading=True,
            login_success=False,
            error_message=None,
            login_progress=0.0,
        )

    async def _run_login(self) -> None:
        username = self._state.username
        password = self._state.password
        logger.info("Tentative de connexion pour %r", username)

        try:
            await self._authenticator.authenticate(username, password, self._on_progress)
        except AuthenticationRejected as exc:
            logger.info("Identifiants refusés pour %r", username)
            self._finish(success=False, message=str(exc) or INVALID_CREDENTIALS_MESSAGE)
        except asyncio.CancelledError:
            if not self._closed:
                logger.warning("Tentative de connexion annulée pour %r", username)
                self._finish(success=False, message=LOGIN_CANCELLED_MESSAGE)
            raise
        except Exception as exc:  # noqa: BLE001
            logger.exception("Erreur inattendue pendant la connexion de %r", username)
            self._finish(success=False, message=str(exc) or LOGIN_FAILED_MESSAGE)
        else:
            logger.info("Connexion réussie pour %r", username)
            self._finish(success=True, message=None)

    def _on_progress(self, fraction: float) -> None:
        if self._state.is_loading:
            self._update(login_progress=min(max(fraction, 0.0), 1.0))

    def _finish(self, *, success: bool, message: str | None) -> None:
        self._update(
            is_loading=False,
            login_success=success,
            error_message=message,
            login_progress=0.0,
        )

    def _update(self, **changes: object) -> None:
        if self._closed:
            return
        self._state = self._state.copy(**changes)
        for callback in list(self._subscribers):
            try:
                callback(self._state)
            except Exception:  # noqa: BLE001
                logger.exception("Abonné en erreur lors de la publication de l'état")
