"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..chat import AUTO_REPLY_DELAY, AsyncioScheduler, ChatSession, Message, format_timestamp
from ..contacts import Contact, ContactNotFoundError
from ..ui.config import LogLevel
from ..ui.themes import get_theme
from .input_reader import ThreadedLineReader
from .providers import get_contacts, get_log_level, get_theme_name

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="daynight",
    help="Mock day/night messenger with a contact list and scripted replies",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

EXIT_WORDS = ("exit", "quit", "q")


def render_message(message: Message, contact: Contact) -> Text:
    """Render a chat message as one console line."""
    if message.is_sent_by_me:
        sender, style = "You", "bold yellow"
    else:
        sender, style = contact.name, "bold green"
    return Text.assemble(
        (f"[{format_timestamp(message.timestamp)}] ", "dim"),
        (f"{sender}: ", style),
        message.text,
    )


@app.command(name="tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    theme: str | None = typer.Option(
        None,
        "--theme",
        "-t",
        help="Color theme: 'day' or 'night'"
    ),
):
    """Launch the contact list and chat TUI."""
    theme_name = get_theme_name(theme)
    try:
        get_theme(theme_name)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    async def _tui():
        from ..ui import run_textual_tui

        await run_textual_tui(
            contacts=get_contacts(),
            log_level=get_log_level(log_level),
            theme=theme_name,
        )

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def contacts():
    """List the available contacts."""
    table = Table(title="Contacts")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Color")

    for position, contact in enumerate(get_contacts().list_contacts(), start=1):
        table.add_row(
            str(position),
            escape(contact.name),
            Text(f"● {contact.color}", style=contact.color),
        )

    console.print(table)


@app.command()
def chat(
    contact: str = typer.Argument(
        "1",
        help="Contact position (1-3) or part of the name"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Print log records at or above: debug, info, warning, or error"
    ),
):
    """Interactive console chat with a contact."""
    try:
        selected = get_contacts().find(contact)
    except ContactNotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    level_name = get_log_level(log_level)

    def debug_callback(level: str, component: str, message: str) -> None:
        """Print session log records that meet the threshold."""
        if level_name is None:
            return
        value = LogLevel.from_string(level)
        if value < LogLevel.from_string(level_name):
            return
        console.print(Text(f"{LogLevel.name(value):<7} [{component}] {message}", style="dim"))

    async def _chat():
        session = ChatSession(selected, AsyncioScheduler())
        session.set_message_callback(lambda message: console.print(render_message(message, selected)))
        session.set_debug_callback(debug_callback)
        reader = ThreadedLineReader(console, "[bold yellow]You:[/bold yellow] ")

        console.print(Text(f"Chat with {selected.name}", style="bold cyan"))
        console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

        try:
            while True:
                try:
                    user_input = await reader.readline()
                except EOFError:
                    # Scripted input: let replies to the last lines arrive
                    if session.pending_replies:
                        await asyncio.sleep(AUTO_REPLY_DELAY + 0.1)
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if user_input.strip().lower() in EXIT_WORDS:
                    console.print("[dim]Goodbye![/dim]")
                    break

                session.draft = user_input
                session.submit_draft()
        finally:
            session.close()

    try:
        asyncio.run(_chat())
    except KeyboardInterrupt:
        console.print("\n[dim]Goodbye![/dim]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
