from .controller import SendController
from .view import ViewConfig, render


class ChatBridge:
    """
    The chat operations the page can call. Every call answers with the
    freshly rendered view tree so the page never keeps its own copy of
    the conversation.
    """

    def __init__(self, controller: SendController, view_config: ViewConfig = None):
        self.controller = controller
        self.view_config = view_config or ViewConfig()

    def attach(self, window):
        for func in (self.get_state, self.edit_context, self.edit_input, self.send, self.clear):
            window.expose(func)

    def get_state(self):
        return render(
            self.controller.store,
            self.view_config,
            busy=self.controller.busy,
            error=self.controller.last_error,
        )

    def edit_context(self, text):
        self.controller.edit_context(text)
        return self.get_state()

    def edit_input(self, text):
        self.controller.edit_input(text)
        return self.get_state()

    def send(self):
        outcome = self.controller.send()
        return {
            "accepted": outcome.accepted,
            "state": outcome.state.value,
            "commands": outcome.commands,
            "view": self.get_state(),
        }

    def clear(self):
        self.controller.clear()
        return self.get_state()
