import logging

import flet as ft

from resultdesk.config.settings import settings
from resultdesk.ui.app import main as app_main


def run() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Starting %s (web=%s, port=%s)", settings.app_title, settings.web_mode, settings.port)
    ft.app(
        target=app_main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
