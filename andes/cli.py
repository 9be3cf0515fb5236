import sys

from .application import App
from .bridge import ChatBridge
from .client import OllamaClient
from .config import AppConfig, parse_args
from .console import log, print_rule, setup_logging
from .controller import SendController
from .conversation import ConversationStore
from .utils import get_resource_path
from .view import ViewConfig


def create_app(config: AppConfig) -> App:
    store = ConversationStore()
    client = OllamaClient(config.ollama_url)
    controller = SendController(store, client, config.model)

    app = App()
    window = app.create_window(
        title=config.title,
        url=get_resource_path("assets/index.html"),
        width=config.width,
        height=config.height,
        resizable=config.resizable,
    )
    ChatBridge(controller, ViewConfig(title=config.title)).attach(window)
    return app


def main(argv=None) -> int:
    config = parse_args(argv)
    setup_logging(config.debug)

    print_rule("Andes")
    log(f"Server: http://{config.ollama_url}/api/chat", style="dim")
    log(f"Model: {config.model}", style="dim")

    app = create_app(config)
    app.run(debug=config.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())
