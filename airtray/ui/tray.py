from __future__ import annotations

import logging

import pystray

from airtray.app import AirTray
from airtray.core.types import Message, Quit, ToggleAirPlay
from airtray.ui.icon import make_icon

log = logging.getLogger(__name__)


def build_icon(app: AirTray) -> pystray.Icon:
    icon = pystray.Icon(app.config.app_id)

    def refresh():
        icon.icon = make_icon(app.airplay_toggle, app.config.icon_size)
        icon.title = app.status_text()
        icon.update_menu()

    def dispatch(message: Message) -> None:
        app.update(message)
        refresh()
        if app.quitting:
            icon.stop()

    def on_airplay(_icon, item):
        # item.checked is the state before the click
        dispatch(ToggleAirPlay(not item.checked))

    def on_quit(_icon, _item):
        dispatch(Quit())

    icon.menu = pystray.Menu(
        pystray.MenuItem("AirPlay", on_airplay, checked=lambda item: app.airplay_toggle),
        pystray.Menu.SEPARATOR,
        pystray.MenuItem("Quit", on_quit),
    )

    icon.icon = make_icon(app.airplay_toggle, app.config.icon_size)
    icon.title = app.status_text()
    return icon


def run_tray(app: AirTray, icon: pystray.Icon | None = None) -> None:
    icon = icon or build_icon(app)
    try:
        icon.run()
    except Exception:
        # Tray backends can be fragile; log it and still stop the receiver.
        log.exception("Tray backend crashed")
    finally:
        app.shutdown()
