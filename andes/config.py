import argparse
from dataclasses import dataclass


@dataclass
class AppConfig:
    ollama_url: str
    model: str
    debug: bool = False
    title: str = "Andes"
    width: int = 800
    height: int = 600
    resizable: bool = True

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "AppConfig":
        return cls(ollama_url=args.ollama_url, model=args.model, debug=args.debug)


def build_parser() -> argparse.ArgumentParser:
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="andes",
        description="Desktop chat client for a local Ollama server",
    )
    parser.add_argument(
        "-o", "--ollama-url", dest="ollama_url", required=True, metavar="HOST:PORT",
        help="Ollama server address, e.g. localhost:11434",
    )
    parser.add_argument(
        "-m", "--model", required=True, metavar="NAME",
        help="Model to chat with, e.g. llama2",
    )
    parser.add_argument("--debug", action="store_true", help="Enable devtools and debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv=None) -> AppConfig:
    return AppConfig.from_args(build_parser().parse_args(argv))
