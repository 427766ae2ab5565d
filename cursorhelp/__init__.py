"""CursorHelp : écran de connexion simulé avec carte de profil."""

__version__ = "0.1.0"
