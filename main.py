"""Entry point: pystray on a daemon thread, tkinter on the main thread."""

import logging
import threading

from calendar_window import DatePickerWindow
from icon_gen import create_icon_image
from settings import build_layout, load_settings
from tray_icon import create_tray

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    settings = load_settings()
    layout = build_layout(
        settings,
        on_select=lambda d: logger.info("Selected %s", d.isoformat()),
        on_change=lambda s: logger.info("Selection %s .. %s", s.start, s.end),
    )
    picker = DatePickerWindow(layout, colors=settings["colors"])

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        picker.root.after(0, picker.toggle)

    def on_clear() -> None:
        picker.root.after(0, picker.clear_selection)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            picker.root.destroy()
        picker.root.after(0, _quit)

    tray = create_tray(
        create_icon_image(layout.today), on_show, on_exit,
        on_clear=on_clear if layout.is_range_mode else None,
        today=layout.today,
    )

    # Run pystray in a daemon thread so it doesn't block tkinter
    threading.Thread(target=tray.run, daemon=True).start()
    picker.root.mainloop()


if __name__ == "__main__":
    main()
