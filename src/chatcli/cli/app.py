"""Main CLI application using Typer."""
import asyncio
import logging
from pathlib import Path
from typing import NoReturn

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__
from ..config import LogLevel, load_config
from ..conversation import ConversationClient
from ..errors import ConfigError, ProviderError
from .providers import get_history_store, get_llm

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="chat",
    help="CLI tool for chatting with a hosted language model",
    add_completion=False,
)

# Replies go to stdout, diagnostics to stderr; text is printed as received
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)

NEW_COMMAND = "new"


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _fail(*lines: str) -> NoReturn:
    for line in lines:
        err_console.print(line, style="red", markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"chat {__version__}")
        raise typer.Exit()


@app.command()
def chat(
    message: list[str] | None = typer.Argument(
        None,
        help=f"Message to send, or '{NEW_COMMAND}' to start a new conversation"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model to use (overrides CHAT_MODEL)"
    ),
    history_file: Path | None = typer.Option(
        None,
        "--history-file",
        dir_okay=False,
        help="Conversation history file (overrides CHAT_HISTORY_FILE)"
    ),
    log_level: LogLevel | None = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Logging level (overrides CHAT_LOG_LEVEL)"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit"
    ),
):
    """Send a message and print the reply, keeping the conversation on disk."""
    try:
        config = load_config()
    except ConfigError as e:
        _fail(*(f"Error: {line}" if i == 0 else line for i, line in enumerate(str(e).splitlines())))

    _configure_logging(log_level or config.log_level)

    words = message or []
    text = " ".join(words)
    if not text:
        _fail(
            "Error: Please provide a message to send.",
            'Usage: chat "your message here"',
            f"       chat {NEW_COMMAND}",
        )

    client = ConversationClient(
        provider=get_llm(config, model=model),
        store=get_history_store(config, history_file=history_file),
        max_tokens=config.max_tokens,
        temperature=config.temperature,
    )

    if words == [NEW_COMMAND]:
        async def _reset() -> None:
            async with client:
                client.new_conversation()

        asyncio.run(_reset())
        console.print("Started a new conversation.")
        return

    async def _send() -> str:
        async with client:
            return await client.send_message(text)

    console.print("Thinking...")
    try:
        reply = asyncio.run(_send())
    except ProviderError as e:
        _fail(f"Error: {e}")

    console.print(f"\n{reply}", markup=False, highlight=False, soft_wrap=True)

    exchanges = client.exchange_count
    if exchanges > 1:
        console.print(f"\n(Conversation has {exchanges} exchanges)")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
