"""Point d'entrée de l'application CursorHelp."""

from __future__ import annotations

import asyncio
import logging
import sys

from cursorhelp.config import ConfigError, load_config
from cursorhelp.logging_setup import configure_logging
from cursorhelp.services import MockAuthenticator
from cursorhelp.viewmodel import LoginViewModel

logger = logging.getLogger("cursorhelp")


def main() -> int:
    """Initialise les dépendances puis lance l'interface Tkinter."""
    try:
        config = load_config()
    except ConfigError as exc:
        configure_logging()
        logger.error("Configuration invalide : %s", exc)
        return 1

    configure_logging(config.log_level)

    # Import différé : Tk n'est chargé qu'une fois la configuration validée.
    from cursorhelp.ui.app import MainWindow

    loop = asyncio.new_event_loop()
    authenticator = MockAuthenticator(
        delay=config.login_delay,
        min_password_length=config.min_password_length,
        progress_steps=config.progress_steps,
    )
    view_model = LoginViewModel(authenticator, loop=loop)
    try:
        app = MainWindow(view_model=view_model, config=config, loop=loop)
        app.run()
    finally:
        view_model.close()
        pending = asyncio.all_tasks(loop)
        if pending:
            loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
        loop.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
