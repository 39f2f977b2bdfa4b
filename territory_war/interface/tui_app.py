"""Textual TUI application for the Territory War master level.

Shows the territory map, a terminal log with combat and mission reports, and
a command line driven by CommandParser.
"""

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import Footer, Header, Input, RichLog, Static

from ..engine.session import GameSession, MissionState
from ..models.errors import AttackValidationError
from .command_parser import CommandErrorType, CommandParseError, CommandParser
from .display import DisplayManager


class MapPanel(Static):
    """Widget to display the territory table."""

    def __init__(self, *args, **kwargs):
        """Initialize map panel."""
        super().__init__(*args, markup=False, **kwargs)
        self.display_manager = DisplayManager()
        self.border_title = "Map"

    def update_map(self, session: GameSession) -> None:
        self.update(self.display_manager.format_map(session.registry))


class TerminalPanel(RichLog):
    """Terminal-style panel with inline command input and responses."""

    def __init__(self, *args, **kwargs):
        """Initialize terminal panel."""
        super().__init__(*args, highlight=True, markup=True, wrap=True, **kwargs)

    def show_command(self, command: str) -> None:
        """Echo the command that was entered."""
        self.write(f"[bold cyan]>[/bold cyan] {escape(command)}")

    def show_response(self, message: str, is_error: bool = False) -> None:
        """Show response to a command.

        Args:
            message: Response message to display
            is_error: If True, display in red; otherwise green
        """
        if is_error:
            self.write(f"[red]{escape(message)}[/red]")
        else:
            self.write(f"[green]{escape(message)}[/green]")
        self.write("")  # Blank line after response

    def show_info(self, message: str) -> None:
        self.write(escape(message))


class TerritoryWarTUI(App):
    """Territory War TUI application."""

    # Disable command palette (Ctrl+P) - we use custom keybindings
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #map_container {
        height: auto;
        max-height: 24;
        overflow-y: auto;
        border: solid green;
    }

    #terminal_container {
        height: 1fr;
        border: solid cyan;
    }

    TerminalPanel {
        height: 1fr;
        overflow-y: auto;
        border: none;
    }

    #input_row {
        dock: bottom;
        height: 1;
        background: $surface;
    }

    #prompt_label {
        width: auto;
        background: $surface;
        color: cyan;
        padding: 0;
    }

    #command_input {
        width: 1fr;
        height: 1;
        background: $surface;
        border: none;
        padding: 0;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=True),
        Binding("ctrl+h", "show_help", "Help", show=True),
    ]

    def __init__(self, session: GameSession, *args, **kwargs):
        """Initialize the TUI app.

        Args:
            session: Master-level game session to play
        """
        super().__init__(*args, **kwargs)
        self.session = session
        self.map_panel = None
        self.terminal_panel = None
        self.display_manager = DisplayManager()
        self.parser = CommandParser()

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()

        self.map_panel = MapPanel(id="map_container")
        yield self.map_panel

        terminal_container = Container(id="terminal_container")
        terminal_container.border_title = "Terminal"
        with terminal_container:
            self.terminal_panel = TerminalPanel()
            yield self.terminal_panel
            with Horizontal(id="input_row"):
                yield Static("war> ", id="prompt_label")
                yield Input(placeholder="", id="command_input")

        yield Footer()

    def on_mount(self) -> None:
        """Show the map and the assigned mission."""
        self.refresh_map()
        if self.terminal_panel:
            self.terminal_panel.write("[bold cyan]Master Level: Missions[/bold cyan]")
            self.terminal_panel.show_info(
                "Mission assigned: " + self.display_manager.describe_mission(self.session.mission)
            )
            self.terminal_panel.show_info("Type 'help' for commands")
            self.terminal_panel.write("")
        self.set_focus_to_input()

    def set_focus_to_input(self) -> None:
        self.query_one("#command_input", Input).focus()

    def refresh_map(self) -> None:
        if self.map_panel:
            self.map_panel.update_map(self.session)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle input submission."""
        command = event.value.strip()
        event.input.value = ""  # Clear input
        if command:
            self.handle_command(command)
        self.set_focus_to_input()

    def handle_command(self, command: str) -> None:
        """Parse and execute one command line.

        Args:
            command: Raw command text
        """
        terminal = self.terminal_panel
        if not terminal:
            return

        terminal.show_command(command)

        try:
            parsed = self.parser.parse(command)
        except CommandParseError as e:
            terminal.show_response(f"❌ {e.message}", is_error=True)
            if e.error_type == CommandErrorType.UNKNOWN_COMMAND:
                terminal.show_info("Available commands: attack, mission, reroll, keep, map, help, quit")
                terminal.show_info("Example: attack 1 3")
                terminal.write("")
            return

        if parsed.action == "attack":
            self._attack(parsed.attacker, parsed.defender)
        elif parsed.action == "mission":
            self._check_mission()
        elif parsed.action in ("reroll", "keep"):
            self._decide_mission(parsed.action)
        elif parsed.action == "map":
            self.refresh_map()
            terminal.show_response("Map refreshed")
        elif parsed.action == "help":
            self._show_help_inline(terminal)
        elif parsed.action == "quit":
            terminal.show_info("Leaving the Master level...")
            self.exit()

    def _attack(self, attacker: int, defender: int) -> None:
        terminal = self.terminal_panel
        try:
            report = self.session.attack(attacker, defender)
        except AttackValidationError as e:
            terminal.show_response(
                self.display_manager.format_error(e, len(self.session.registry)), is_error=True
            )
            return

        terminal.show_info(self.display_manager.format_combat_report(report))
        terminal.write("")
        self.refresh_map()

    def _check_mission(self) -> None:
        terminal = self.terminal_panel
        accomplished = self.session.check_mission()
        message = self.display_manager.format_mission_result(accomplished)
        terminal.show_response(message, is_error=not accomplished)
        if accomplished:
            terminal.show_info("Type 'reroll' for a new mission or 'keep' to keep this one")
            terminal.write("")

    def _decide_mission(self, action: str) -> None:
        terminal = self.terminal_panel
        if self.session.mission_state is not MissionState.SUCCEEDED:
            terminal.show_response(
                "❌ Accomplish and check your mission before choosing a new one", is_error=True
            )
            return

        if action == "reroll":
            mission = self.session.reroll_mission()
            terminal.show_response(
                "New mission generated: " + self.display_manager.describe_mission(mission)
            )
        else:
            self.session.retain_mission()
            terminal.show_response("Keeping the current mission.")

    def _show_help_inline(self, terminal: TerminalPanel) -> None:
        terminal.write("[bold cyan]=== Territory War - Command Help ===[/bold cyan]")
        terminal.write("")
        terminal.write("  [cyan]attack <a> <d>[/cyan]  - Territory a attacks territory d (one round)")
        terminal.write("  [cyan]mission[/cyan]         - Check the current mission")
        terminal.write("  [cyan]reroll[/cyan]          - Draw a new mission after accomplishing one")
        terminal.write("  [cyan]keep[/cyan]            - Keep the accomplished mission")
        terminal.write("  [cyan]map[/cyan]             - Redraw the map")
        terminal.write("  [cyan]quit[/cyan]            - Leave the level")
        terminal.write("")

    def action_show_help(self) -> None:
        """Show help information."""
        if self.terminal_panel:
            self._show_help_inline(self.terminal_panel)
