import logging

import requests

from .errors import TransportError
from .models import InboundReply, OutboundRequest


class OllamaClient:
    """Blocking client for the /api/chat endpoint of an Ollama server."""

    def __init__(self, host: str, session: requests.Session = None):
        self.host = host
        self.session = session or requests.Session()
        self.logger = logging.getLogger("Andes.Client")

    @property
    def chat_url(self) -> str:
        return f"http://{self.host}/api/chat"

    def chat(self, request: OutboundRequest) -> InboundReply:
        """
        POST the request and parse the reply.

        No timeout is set; the call waits for the transport to give up.
        The status code is not inspected, error bodies fail in the parser.
        """
        url = self.chat_url
        self.logger.debug(f"POST {url} ({len(request.messages)} messages)")
        try:
            response = self.session.post(
                url,
                json=request.to_dict(),
                headers={"Content-Type": "application/json"},
            )
            text = response.text
        except requests.RequestException as e:
            raise TransportError(url, e) from e

        self.logger.debug(f"Response {response.status_code} from {url}")
        return InboundReply.from_json(text)
