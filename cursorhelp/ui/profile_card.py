"""Carte de profil utilisateur : avatar, nom et courte biographie."""

from __future__ import annotations

import tkinter as tk
from tkinter import font as tkfont
from tkinter import ttk
from typing import Callable

from PIL import Image, ImageTk

from cursorhelp.ui.avatar import render_default_avatar
from cursorhelp.ui.text import ellipsize
from cursorhelp.ui.theme import (
    BODY_FONT,
    CARD_COLOR,
    NAME_FONT,
    TEXT_PRIMARY_COLOR,
    TEXT_SECONDARY_COLOR,
)

NAME_MAX_LINES = 1
BIO_MAX_LINES = 2
CARD_PADDING = 16
# Largeur utilisée avant le premier événement <Configure>.
_INITIAL_TEXT_WIDTH = 260

AvatarFactory = Callable[[tk.Misc], tk.Widget]


def configure_profile_styles(style: ttk.Style) -> None:
    style.configure("ProfileCard.TFrame", background=CARD_COLOR)
    style.configure(
        "ProfileName.TLabel",
        background=CARD_COLOR,
        foreground=TEXT_PRIMARY_COLOR,
        font=NAME_FONT,
    )
    style.configure(
        "ProfileBio.TLabel",
        background=CARD_COLOR,
        foreground=TEXT_SECONDARY_COLOR,
        font=BODY_FONT,
    )
    style.configure("ProfileAvatar.TLabel", background=CARD_COLOR)


def image_avatar_factory(image: Image.Image) -> AvatarFactory:
    """Fabrique d'avatar affichant une image Pillow déjà préparée."""

    def build(parent: tk.Misc) -> tk.Widget:
        photo = ImageTk.PhotoImage(image)
        label = ttk.Label(parent, image=photo, style="ProfileAvatar.TLabel")
        label.image = photo
        return label

    return build


class UserProfileCard(ttk.Frame):
    """Affiche un nom (une ligne) et une biographie (deux lignes), tronqués par « … ».

    ``avatar_factory`` permet de remplacer l'avatar par défaut par n'importe
    quel widget construit dans le cadre de la carte.
    """

    def __init__(
        self,
        parent: tk.Misc,
        username: str,
        bio: str,
        *,
        avatar_factory: AvatarFactory | None = None,
    ) -> None:
        super().__init__(parent, style="ProfileCard.TFrame", padding=CARD_PADDING)
        self._username = username
        self._bio = bio
        self._name_font = tkfont.Font(font=NAME_FONT)
        self._bio_font = tkfont.Font(font=BODY_FONT)
        self._text_width = _INITIAL_TEXT_WIDTH

        self.columnconfigure(1, weight=1)

        factory = avatar_factory or image_avatar_factory(render_default_avatar())
        self._avatar = factory(self)
        self._avatar.grid(row=0, column=0, sticky="n", padx=(0, CARD_PADDING))

        text_frame = ttk.Frame(self, style="ProfileCard.TFrame")
        text_frame.grid(row=0, column=1, sticky="ew")
        text_frame.columnconfigure(0, weight=1)
        text_frame.bind("<Configure>", self._on_resize)

        self._name_label = ttk.Label(text_frame, style="ProfileName.TLabel")
        self._name_label.grid(row=0, column=0, sticky="w")
        self._bio_label = ttk.Label(text_frame, style="ProfileBio.TLabel", justify=tk.LEFT)
        self._bio_label.grid(row=1, column=0, sticky="w", pady=(4, 0))

        self._render_text()

    def set_profile(self, username: str, bio: str) -> None:
        self._username = username
        self._bio = bio
        self._render_text()

    def _on_resize(self, event: tk.Event) -> None:
        if event.width > 1 and event.width != self._text_width:
            self._text_width = event.width
            self._render_text()

    def _render_text(self) -> None:
        width = self._text_width
        name_lines = ellipsize(
            self._username,
            NAME_MAX_LINES,
            lambda line: self._name_font.measure(line) <= width,
        )
        bio_lines = ellipsize(
            self._bio,
            BIO_MAX_LINES,
            lambda line: self._bio_font.measure(line) <= width,
        )
        self._name_label.configure(text="\n".join(name_lines))
        self._bio_label.configure(text="\n".join(bio_lines))
