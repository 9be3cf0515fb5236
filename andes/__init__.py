from importlib.metadata import version, PackageNotFoundError

# Fetch version from installed package metadata to avoid manual updates
try:
    __version__ = version("andes")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from .errors import AndesError, TransportError, ReplyParseError
from .models import Turn, OutboundRequest, InboundReply
from .conversation import ConversationStore
from .request_builder import build_request
from .client import OllamaClient
from .controller import SendController, SendOutcome, SendState
from .view import ViewConfig, render
