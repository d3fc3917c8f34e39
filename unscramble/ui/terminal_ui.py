"""Terminal-based UI for the unscramble game using Rich."""

import os

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.box import ROUNDED, DOUBLE, HEAVY

from ..state.game_state import GameUiState
from ..state.static_config import GameConfig


class TerminalUI:
    """Rich terminal interface for the unscramble game."""

    def __init__(self, config: GameConfig, console: Console | None = None):
        self.console = console or Console()
        self.config = config

    def clear_screen(self) -> None:
        """Clear the terminal screen."""
        if self.console.is_terminal:
            os.system('cls' if os.name == 'nt' else 'clear')

    def show_title_screen(self) -> None:
        """Display the game title screen."""
        self.clear_screen()

        title_art = """
    ╔═══════════════════════════════════════════════╗
    ║                                               ║
    ║       U  N  S  C  R  A  M  B  L  E            ║
    ║                                               ║
    ║         Put the letters back in order         ║
    ║                                               ║
    ╚═══════════════════════════════════════════════╝
"""
        self.console.print(title_art, style="bold cyan")

        self.console.print(Panel(
            Text(self.config.title, justify="center", style="bold yellow"),
            box=DOUBLE,
            border_style="yellow"
        ))

        if self.config.description:
            self.console.print(Panel(
                self.config.description,
                title="[bold]Word Pack[/bold]",
                box=ROUNDED,
                border_style="blue"
            ))

        self.console.print(f"[dim]{self.config.get_rules_summary()}[/dim]", justify="center")
        self.console.print("[dim]Type :help for commands[/dim]", justify="center")
        self.console.print()

    def show_round(self, ui_state: GameUiState) -> None:
        """Display the scrambled word for the active round."""
        self.show_status_bar(ui_state)

        self.console.print(Panel(
            Text(ui_state.current_scrambled_word, justify="center", style="bold magenta"),
            title="[bold white]Unscramble the word[/bold white]",
            box=HEAVY,
            border_style="magenta",
            padding=(1, 4)
        ))

        if ui_state.is_guessed_word_wrong:
            self.console.print("[bold red]Wrong guess! Try again.[/bold red]", justify="center")
        self.console.print()

    def show_status_bar(self, ui_state: GameUiState) -> None:
        """Display the round counter and score."""
        status_table = Table(box=ROUNDED, show_header=True, header_style="bold")
        status_table.add_column("Word", justify="center")
        status_table.add_column("Score", justify="center")

        status_table.add_row(
            f"{ui_state.current_word_count}/{self.config.max_rounds}",
            f"[green]{ui_state.score}[/green]"
        )

        self.console.print(status_table)

    def get_player_input(self) -> str:
        """Get input from the player."""
        self.console.print("[bold green]>[/bold green] ", end="")
        try:
            return input().strip()
        except EOFError:
            return ":quit"
        except KeyboardInterrupt:
            return ":quit"

    def show_help(self) -> None:
        """Display help information."""
        help_text = """
[bold]PLAYING:[/bold]
  Type your guess and press ENTER. Case does not matter.

[bold]COMMANDS:[/bold]
  [cyan]:skip[/cyan] / [cyan]:s[/cyan]      - Skip this word (no points)
  [cyan]:reset[/cyan] / [cyan]:new[/cyan]   - Start a new game
  [cyan]:help[/cyan] / [cyan]:?[/cyan]      - Show this help
  [cyan]:quit[/cyan] / [cyan]:q[/cyan]      - Quit the game
"""
        self.console.print(Panel(
            help_text,
            title="[bold]Help[/bold]",
            box=ROUNDED,
            border_style="cyan"
        ))

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(Panel(
            message,
            title="[bold red]Error[/bold red]",
            box=ROUNDED,
            border_style="red"
        ))

    def show_message(self, message: str, style: str = "white") -> None:
        """Display a simple message."""
        self.console.print(f"[{style}]{message}[/{style}]")

    def show_game_over(self, ui_state: GameUiState) -> bool:
        """Display the final score and ask whether to play again."""
        self.console.print(Panel(
            f"[bold green]Congratulations![/bold green]\n\n"
            f"You scored [bold]{ui_state.score}[/bold] points.",
            title="[bold]GAME OVER[/bold]",
            box=DOUBLE,
            border_style="green"
        ))
        return self.confirm("Play again?")

    def confirm(self, message: str) -> bool:
        """Ask for confirmation."""
        self.console.print(f"{message} [dim](y/n)[/dim] ", end="")
        try:
            response = input().strip().lower()
        except (EOFError, KeyboardInterrupt):
            return False
        return response in ("y", "yes")
