import functools
import logging
import traceback

import webview


class Window:
    """
    Thin wrapper around a pywebview window.

    Functions exposed through `expose` are guarded: an exception inside one
    is logged and returned to the page as an error object instead of
    killing the bridge call.
    """

    def __init__(self, name, title, url=None, html=None, width=800, height=600,
                 resizable=True, hidden=True, min_size=(400, 300)):
        self.name = name
        self.title = title
        self.logger = logging.getLogger(f"Andes.Window.{name}")
        self._window = webview.create_window(
            title,
            url=url,
            html=html,
            width=width,
            height=height,
            resizable=resizable,
            hidden=hidden,
            min_size=min_size,
        )

    def expose(self, func, name=None):
        func_name = name or func.__name__

        @functools.wraps(func)
        def safe_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                self.logger.error(f"'{func_name}' crashed: {e}")
                self.logger.debug(traceback.format_exc())
                return {"error": "Execution Failed", "message": str(e)}

        safe_wrapper.__name__ = func_name
        self._window.expose(safe_wrapper)
        return safe_wrapper

    def show(self):
        self._window.show()
