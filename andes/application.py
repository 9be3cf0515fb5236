import logging

import webview

from .system import SystemAPI
from .window import Window


class App:
    """
    Owns the desktop windows and the pywebview event loop.
    """

    def __init__(self):
        self.windows = {}
        self.system = SystemAPI(self)
        self.is_running = False
        self.logger = logging.getLogger("Andes.App")

    def create_window(self, title="Andes", name="main", url=None, html=None,
                      width=800, height=600, resizable=True, hidden=True):
        if name in self.windows:
            raise ValueError(f"A window named '{name}' already exists")
        window = Window(
            name,
            title,
            url=url,
            html=html,
            width=width,
            height=height,
            resizable=resizable,
            hidden=hidden,
        )
        # Shell commands are available on every window
        window.expose(self.system.greet)
        window.expose(self.system.show_main_window)
        self.windows[name] = window
        self.logger.debug(f"Created window '{name}' ({width}x{height})")
        return window

    def get_window(self, name):
        return self.windows.get(name)

    def run(self, debug=False):
        if not self.windows:
            raise RuntimeError("Create a window before calling run()")
        self.is_running = True
        try:
            webview.start(debug=debug)
        finally:
            self.is_running = False
