"""Instantanés d'état partagés entre le view-model et la couche UI."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace


class LoginPhase(enum.Enum):
    """Phase courante du formulaire, déduite de l'instantané."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class LoginUiState:
    """État complet et immuable de l'écran de connexion."""

    username: str = ""
    password: str = ""
    is_loading: bool = False
    login_success: bool = False
    error_message: str | None = None
    login_progress: float = 0.0

    @property
    def phase(self) -> LoginPhase:
        if self.is_loading:
            return LoginPhase.SUBMITTING
        if self.login_success:
            return LoginPhase.SUCCEEDED
        if self.error_message is not None:
            return LoginPhase.FAILED
        return LoginPhase.IDLE

    def copy(self, **changes: object) -> LoginUiState:
        """Retourne un nouvel instantané avec les champs modifiés."""
        return replace(self, **changes)
