import logging


class SystemAPI:
    """
    Native shell commands exposed to every Andes window.
    """

    def __init__(self, app):
        self.app = app
        self.logger = logging.getLogger("Andes.System")

    def greet(self, name):
        return f"<strong>Hello, {name}! You've been greeted from Python!</strong>"

    def show_main_window(self, name="main"):
        """
        Make a window visible. Windows start hidden so the page can
        ask for this once its DOM is ready.
        """
        window = self.app.get_window(name)
        if window is None:
            self.logger.warning(f"No window named '{name}' to show")
            return False
        window.show()
        return True
