"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_clear: Callable[[], None] | None = None,
    today: date | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Picker", lambda _icon, _item: on_show(), default=True),
    ]
    if on_clear is not None:
        items.append(MenuItem("Clear Selection", lambda _icon, _item: on_clear()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    today = today or date.today()
    return pystray.Icon("date-picker", icon_image,
                        f"Date Picker – {today.strftime('%d.%m.%Y')}", Menu(*items))
