"""Interface Tkinter principale."""

from __future__ import annotations

import asyncio
import logging
import tkinter as tk
from tkinter import ttk

import sv_ttk

from cursorhelp.config import AppConfig
from cursorhelp.state import LoginPhase, LoginUiState
from cursorhelp.ui.animation import SHAKE_FRAME_MS, shake_frames
from cursorhelp.ui.avatar import load_avatar
from cursorhelp.ui.profile_card import (
    UserProfileCard,
    configure_profile_styles,
    image_avatar_factory,
)
from cursorhelp.ui.theme import (
    ACCENT_COLOR,
    BACKGROUND_COLOR,
    BODY_FONT,
    CARD_COLOR,
    SMALL_FONT,
    STATUS_ERROR_COLOR,
    STATUS_SUCCESS_COLOR,
    TEXT_PRIMARY_COLOR,
    TEXT_SECONDARY_COLOR,
    TITLE_FONT,
)
from cursorhelp.viewmodel import LoginViewModel

WINDOW_WIDTH = 440
WINDOW_HEIGHT = 640
CARD_MARGIN = 24
ASYNC_PUMP_MS = 15
PASSWORD_MASK = "•"

logger = logging.getLogger(__name__)


class MainWindow:
    """Fenêtre de connexion.

    Tout l'affichage découle des instantanés publiés par le view-model ; la
    fenêtre se contente de lui transmettre les saisies. La boucle asyncio est
    pompée depuis la boucle Tk pour que la tentative de connexion s'exécute
    sans bloquer l'interface.
    """

    def __init__(
        self,
        view_model: LoginViewModel,
        config: AppConfig,
        loop: asyncio.AbstractEventLoop,
    ) -> None:
        self._view_model = view_model
        self._config = config
        self._loop = loop
        self._closed = False

        self.root = tk.Tk()
        self.root.title("CursorHelp – Connexion")
        self.root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.root.minsize(WINDOW_WIDTH, WINDOW_HEIGHT)

        sv_ttk.set_theme(config.theme)
        self.root.configure(bg=BACKGROUND_COLOR)
        self._configure_styles()

        self._username_var = tk.StringVar()
        self._password_var = tk.StringVar()
        self._progress_var = tk.DoubleVar(value=0.0)
        self._progress_caption_var = tk.StringVar()
        self._syncing_fields = False
        self._last_error: str | None = None
        self._shake_after_id: str | None = None
        self._pump_after_id: str | None = None
        self._profile_card: UserProfileCard | None = None

        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)
        self.root.rowconfigure(3, weight=1)

        self._build_header()
        self._build_login_card()
        self._build_success_area()

        self._username_var.trace_add("write", self._on_username_var_changed)
        self._password_var.trace_add("write", self._on_password_var_changed)
        self.root.bind("<Return>", lambda _: self.submit())
        self.root.bind("<Escape>", lambda _: self._view_model.clear_error())
        self.root.protocol("WM_DELETE_WINDOW", self.close)

        self._unsubscribe = self._view_model.subscribe(self._render)
        self._render(self._view_model.state)

    # --------------------------------------------------------------------- UI -
    def _configure_styles(self) -> None:
        style = ttk.Style()
        style.configure("Main.TFrame", background=BACKGROUND_COLOR)
        style.configure("Card.TFrame", background=CARD_COLOR)
        style.configure(
            "HeaderTitle.TLabel",
            background=BACKGROUND_COLOR,
            foreground=ACCENT_COLOR,
            font=TITLE_FONT,
        )
        style.configure(
            "Field.TLabel",
            background=CARD_COLOR,
            foreground=TEXT_SECONDARY_COLOR,
            font=SMALL_FONT,
        )
        style.configure(
            "Error.TLabel",
            background=CARD_COLOR,
            foreground=STATUS_ERROR_COLOR,
            font=SMALL_FONT,
        )
        style.configure(
            "Success.TLabel",
            background=BACKGROUND_COLOR,
            foreground=STATUS_SUCCESS_COLOR,
            font=(TITLE_FONT[0], 13, "bold"),
        )
        style.configure(
            "Progress.TLabel",
            background=CARD_COLOR,
            foreground=TEXT_PRIMARY_COLOR,
            font=BODY_FONT,
        )
        style.configure("Accent.TButton", font=(BODY_FONT[0], 11, "bold"))
        style.configure("TButton", padding=(16, 8))
        configure_profile_styles(style)
        self.root.option_add("*Font", "Helvetica 11")

    def _build_header(self) -> None:
        frame = ttk.Frame(self.root, style="Main.TFrame")
        frame.grid(row=1, column=0, pady=(0, 24))

        ttk.Label(frame, text="Connexion", style="HeaderTitle.TLabel").pack()

    def _build_login_card(self) -> None:
        self._card = ttk.Frame(self.root, style="Card.TFrame", padding=(24, 24))
        self._card.grid(row=2, column=0, sticky="ew", padx=CARD_MARGIN)
        self._card.columnconfigure(0, weight=1)

        ttk.Label(self._card, text="Nom d'utilisateur", style="Field.TLabel").grid(
            row=0, column=0, sticky="w"
        )
        self._username_entry = ttk.Entry(self._card, textvariable=self._username_var)
        self._username_entry.grid(row=1, column=0, sticky="ew", pady=(4, 16), ipady=4)

        ttk.Label(self._card, text="Mot de passe", style="Field.TLabel").grid(
            row=2, column=0, sticky="w"
        )
        self._password_entry = ttk.Entry(
            self._card,
            textvariable=self._password_var,
            show=PASSWORD_MASK,
        )
        self._password_entry.grid(row=3, column=0, sticky="ew", pady=(4, 8), ipady=4)

        self._error_label = ttk.Label(
            self._card,
            style="Error.TLabel",
            wraplength=WINDOW_WIDTH - 2 * CARD_MARGIN - 48,
        )
        self._error_label.grid(row=4, column=0, sticky="w", pady=(0, 8))

        self._action_frame = ttk.Frame(self._card, style="Card.TFrame")
        self._action_frame.grid(row=5, column=0, sticky="ew", pady=(8, 0))
        self._action_frame.columnconfigure(0, weight=1)

        self._login_button = ttk.Button(
            self._action_frame,
            text="Se connecter",
            command=self.submit,
            style="Accent.TButton",
        )
        self._login_button.grid(row=0, column=0, sticky="ew")

        self._progress_bar = ttk.Progressbar(
            self._action_frame,
            mode="determinate",
            maximum=100.0,
            variable=self._progress_var,
        )
        self._progress_caption = ttk.Label(
            self._action_frame,
            textvariable=self._progress_caption_var,
            style="Progress.TLabel",
        )

    def _build_success_area(self) -> None:
        self._success_frame = ttk.Frame(self.root, style="Main.TFrame")

        ttk.Label(
            self._success_frame,
            text="Connexion réussie",
            style="Success.TLabel",
        ).grid(row=0, column=0, pady=(16, 12))
        self._success_frame.columnconfigure(0, weight=1)

        avatar = load_avatar(self._config.profile_avatar) if self._config.profile_avatar else None
        self._profile_card = UserProfileCard(
            self._success_frame,
            username="",
            bio=self._config.profile_bio,
            avatar_factory=image_avatar_factory(avatar) if avatar else None,
        )
        self._profile_card.grid(row=1, column=0, sticky="ew")

        ttk.Button(
            self._success_frame,
            text="Se déconnecter",
            command=self._view_model.reset_success,
        ).grid(row=2, column=0, pady=(12, 0))

    # ------------------------------------------------------------- Rendering -
    def _render(self, state: LoginUiState) -> None:
        self._sync_fields(state)
        phase = state.phase

        entry_state = tk.DISABLED if phase is LoginPhase.SUBMITTING else tk.NORMAL
        self._username_entry.configure(state=entry_state)
        self._password_entry.configure(state=entry_state)

        failed = phase is LoginPhase.FAILED
        self._error_label.configure(text=state.error_message if failed else "")

        if phase is LoginPhase.SUBMITTING:
            self._login_button.grid_remove()
            percent = min(max(int(state.login_progress * 100), 1), 100)
            self._progress_var.set(percent)
            self._progress_caption_var.set(f"{percent} %")
            self._progress_bar.grid(row=0, column=0, sticky="ew", ipady=6)
            self._progress_caption.grid(row=1, column=0, pady=(6, 0))
        else:
            self._progress_bar.grid_remove()
            self._progress_caption.grid_remove()
            self._login_button.grid()

        if phase is LoginPhase.SUCCEEDED:
            if self._profile_card:
                self._profile_card.set_profile(state.username, self._config.profile_bio)
            self._success_frame.grid(row=3, column=0, sticky="new", padx=CARD_MARGIN)
        else:
            self._success_frame.grid_remove()

        if failed and state.error_message != self._last_error:
            self._start_shake()
        self._last_error = state.error_message

    def _sync_fields(self, state: LoginUiState) -> None:
        self._syncing_fields = True
        try:
            if self._username_var.get() != state.username:
                self._username_var.set(state.username)
            if self._password_var.get() != state.password:
                self._password_var.set(state.password)
        finally:
            self._syncing_fields = False

    def _start_shake(self) -> None:
        if self._shake_after_id:
            self.root.after_cancel(self._shake_after_id)
        self._play_shake(shake_frames(), 0)

    def _play_shake(self, frames: list[int], index: int) -> None:
        offset = frames[index]
        self._card.grid_configure(padx=(CARD_MARGIN + offset, CARD_MARGIN - offset))
        if index + 1 < len(frames):
            self._shake_after_id = self.root.after(
                SHAKE_FRAME_MS, self._play_shake, frames, index + 1
            )
        else:
            self._shake_after_id = None

    # --------------------------------------------------------------- Callbacks -
    def _on_username_var_changed(self, *_: object) -> None:
        if not self._syncing_fields:
            self._view_model.on_username_change(self._username_var.get())

    def _on_password_var_changed(self, *_: object) -> None:
        if not self._syncing_fields:
            self._view_model.on_password_change(self._password_var.get())

    def submit(self) -> None:
        self._view_model.perform_login()

    def _pump_asyncio(self) -> None:
        """Exécute les rappels asyncio prêts puis se reprogramme."""
        self._loop.call_soon(self._loop.stop)
        self._loop.run_forever()
        self._pump_after_id = self.root.after(ASYNC_PUMP_MS, self._pump_asyncio)

    def close(self) -> None:
        """Annule la tentative en cours, vide la boucle asyncio puis ferme la fenêtre."""
        if self._closed:
            return
        self._closed = True

        for after_id in (self._pump_after_id, self._shake_after_id):
            if after_id:
                try:
                    self.root.after_cancel(after_id)
                except ValueError:
                    pass

        self._unsubscribe()
        self._view_model.close()

        pending = asyncio.all_tasks(self._loop)
        if pending:
            logger.debug("Attente de %d tâche(s) asyncio avant fermeture", len(pending))
            self._loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))

        self.root.destroy()

    # ----------------------------------------------------------------- Public -
    def run(self) -> None:
        self._pump_asyncio()
        self.root.mainloop()
