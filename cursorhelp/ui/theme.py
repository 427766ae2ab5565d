"""Palette et polices partagées par les widgets."""

ACCENT_COLOR = "#7C9CFF"
ACCENT_CONTAINER_COLOR = "#2F3A66"
ON_ACCENT_CONTAINER_COLOR = "#DCE1FF"
BACKGROUND_COLOR = "#121212"
CARD_COLOR = "#1C1C22"
TEXT_PRIMARY_COLOR = "#FFFFFF"
TEXT_SECONDARY_COLOR = "#B3B3B3"
STATUS_ERROR_COLOR = "#F87171"
STATUS_SUCCESS_COLOR = "#4ADE80"

FONT_FAMILY = "Helvetica"
TITLE_FONT = (FONT_FAMILY, 22, "bold")
NAME_FONT = (FONT_FAMILY, 13, "bold")
BODY_FONT = (FONT_FAMILY, 11)
SMALL_FONT = (FONT_FAMILY, 10)
