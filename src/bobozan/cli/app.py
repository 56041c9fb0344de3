"""Bobozan CLI Application.

A Textual-based terminal interface for playing Bobozan:
- Main menu (ruleset selection)
- Rules reference
- Match screen with energy, actions and battle log
- End-of-match results
"""

from __future__ import annotations

import logging
from typing import Optional

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import (
    Button,
    Footer,
    Header,
    Markdown,
    OptionList,
    Rule,
    Static,
)
from textual.widgets.option_list import Option

from bobozan import config
from bobozan.engine.game_engine import GameEngine, TurnResult
from bobozan.models.actions import ActionId, Ruleset, format_action_for_display, lookup
from bobozan.models.state import GameStatus, LogEntry
from bobozan.opponents.base import get_opponent_by_type

logger = logging.getLogger(__name__)


RULESET_TITLES = {
    Ruleset.CLASSIC: "Classic",
    Ruleset.TRI_PHASE: "Tri-Phase",
}

RULES_MARKDOWN = """\
# How to play

Each round both sides pick a move at the same time. Every move except
**Charge** spends energy; Charge gains one. Both sides start with 1 energy.
One decisive hit ends the match.

## Classic

| Move | Cost | Notes |
|------|------|-------|
| Charge | 0 | +1 energy. Loses to any wave. |
| Defend | 0 | Blocks a Small Wave. |
| Magic Defend | 2 | Absorbs every wave. |
| Small Wave | 1 | Hits a charging opponent. |
| Big Wave | 3 | Pierces Defend, overwhelms Small Wave. |

## Tri-Phase

Three factions: **Pegasus beats Ice, Ice beats Cotton, Cotton beats Pegasus.**
Each faction has a T1 (1), T2 (2) and T3 (3) attack and a free guard.

- A higher tier attack always wins a clash.
- Same tier: the advantaged faction wins. Pegasus Punch always shatters Ice Arrow.
- A faction guard blocks every T1 attack, but T2 and T3 attacks only from the
  faction it beats.
"""

CSS = """
Screen {
    background: $surface;
}

#main-menu {
    align: center middle;
    width: 100%;
    height: 100%;
}

.menu-container {
    width: 60;
    height: auto;
    border: solid green;
    padding: 1 2;
}

.menu-title {
    text-align: center;
    text-style: bold;
    color: $success;
    margin-bottom: 1;
}

.menu-button {
    width: 100%;
    margin: 1 0;
}

.panel-title {
    text-style: bold;
    color: $secondary;
    margin-bottom: 1;
}

#status-bar {
    dock: top;
    height: 1;
    background: $primary;
    color: $text;
    padding: 0 1;
}

#energy-row {
    height: 3;
    border: solid $primary;
    padding: 0 1;
}

.energy-box {
    width: 1fr;
}

#bottom-row {
    height: 1fr;
}

#history-panel {
    width: 1fr;
    border: solid $primary;
    padding: 0 1;
}

#latest-entry {
    height: auto;
    border: tall $accent;
    padding: 0 1;
    margin-bottom: 1;
}

#actions-panel {
    width: 1fr;
    border: solid $primary;
    padding: 0 1;
}

.result-victory {
    color: $success;
    text-style: bold;
}

.result-defeat {
    color: $error;
    text-style: bold;
}
"""


# =============================================================================
# Display helpers
# =============================================================================


def energy_pips(energy: int) -> str:
    """Render energy as filled circles, with the number for large values."""
    if energy > 6:
        return f"●×{energy}"
    return "●" * energy if energy else "○"


def format_log_entry(entry: LogEntry) -> str:
    """Format one battle log entry as a header line plus the result message."""
    you = lookup(entry.player_action).label
    them = lookup(entry.ai_action).label
    return f"Round {entry.round}: You ({you}) vs Opponent ({them})\n{entry.result_message}"


def format_status_bar(game: GameEngine) -> str:
    return (
        f"{RULESET_TITLES[game.ruleset]} | Round {game.round} | "
        f"Opponent: {game.opponent.name}"
    )


# =============================================================================
# Screens
# =============================================================================


class MainMenuScreen(Screen):
    """Main menu screen with ruleset selection."""

    BINDINGS = [
        Binding("c", "start_classic", "Classic"),
        Binding("t", "start_tri_phase", "Tri-Phase"),
        Binding("r", "show_rules", "Rules"),
        Binding("q", "quit", "Quit"),
    ]

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-menu"):
            with Vertical(classes="menu-container"):
                yield Static("BOBOZAN", classes="menu-title")
                yield Static("Charge. Defend. Strike first.", classes="menu-title")
                yield Rule()
                yield Button("Classic", id="classic", classes="menu-button", variant="success")
                yield Button("Tri-Phase", id="tri-phase", classes="menu-button", variant="primary")
                yield Button("Rules", id="rules", classes="menu-button", variant="default")
                yield Button("Quit", id="quit", classes="menu-button", variant="error")
        yield Footer()

    def on_mount(self) -> None:
        """Focus the configured default ruleset."""
        default = "classic" if config.get_ruleset() == Ruleset.CLASSIC else "tri-phase"
        self.query_one(f"#{default}", Button).focus()

    @on(Button.Pressed, "#classic")
    def action_start_classic(self) -> None:
        self.app.push_screen(GameScreen(Ruleset.CLASSIC))

    @on(Button.Pressed, "#tri-phase")
    def action_start_tri_phase(self) -> None:
        self.app.push_screen(GameScreen(Ruleset.TRI_PHASE))

    @on(Button.Pressed, "#rules")
    def action_show_rules(self) -> None:
        self.app.push_screen(RulesScreen())

    @on(Button.Pressed, "#quit")
    def action_quit(self) -> None:
        self.app.exit()


class RulesScreen(Screen):
    """Rules reference for both rulesets."""

    BINDINGS = [
        Binding("escape", "go_back", "Back"),
    ]

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll():
            yield Markdown(RULES_MARKDOWN)
        yield Footer()

    def action_go_back(self) -> None:
        self.app.pop_screen()


class GameScreen(Screen):
    """Match screen: energy, numbered actions and battle log."""

    BINDINGS = [
        Binding("escape", "leave_game", "Main Menu"),
        Binding("r", "restart", "Restart"),
    ] + [
        Binding(str(n), f"select_action({n - 1})", f"Action {n}", show=False)
        for n in range(1, 10)
    ]

    def __init__(self, ruleset: Ruleset) -> None:
        super().__init__()
        self.ruleset = ruleset
        self.game: GameEngine = self.create_game(ruleset)
        self.available_actions: list[ActionId] = []

    @staticmethod
    def create_game(ruleset: Ruleset) -> GameEngine:
        """Build an engine from the environment configuration."""
        seed = config.get_random_seed()
        opponent = get_opponent_by_type(config.get_opponent_type(), random_seed=seed)
        return GameEngine(ruleset, opponent=opponent, initial_energy=config.get_initial_energy())

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="status-bar")

        with Horizontal(id="energy-row"):
            yield Static("", id="player-energy", classes="energy-box")
            yield Static("", id="opponent-energy", classes="energy-box")

        with Horizontal(id="bottom-row"):
            with Vertical(id="history-panel"):
                yield Static("BATTLE LOG", classes="panel-title")
                with Vertical(id="latest-entry"):
                    yield Static("Awaiting first move...", id="latest-entry-text")
                with VerticalScroll(id="older-entries"):
                    yield Static("", id="older-entries-content")
            with Vertical(id="actions-panel"):
                yield Static("ACTIONS (1-9, or arrows + Enter)", classes="panel-title")
                yield OptionList(id="action-list")

        yield Footer()

    def on_mount(self) -> None:
        self.update_display()
        self.query_one("#action-list", OptionList).focus()

    def update_display(self) -> None:
        """Refresh every panel from the engine state."""
        self.query_one("#status-bar", Static).update(format_status_bar(self.game))

        player = self.game.get_state("player")
        opponent = self.game.get_state("opponent")
        self.query_one("#player-energy", Static).update(
            f"You: {energy_pips(player.energy)} ({player.energy})"
        )
        self.query_one("#opponent-energy", Static).update(
            f"Opponent: {energy_pips(opponent.energy)} ({opponent.energy})"
        )

        self.available_actions = self.game.get_available_actions("player")
        action_list = self.query_one("#action-list", OptionList)
        action_list.clear_options()
        for i, action in enumerate(self.available_actions):
            label = format_action_for_display(action, i + 1)
            description = lookup(action).description
            action_list.add_option(Option(f"{label}\n     {description}", id=str(i)))
        if self.available_actions:
            action_list.highlighted = 0

        self._update_history()

    def _update_history(self) -> None:
        latest = self.query_one("#latest-entry-text", Static)
        older = self.query_one("#older-entries-content", Static)
        history = self.game.get_history()

        if not history:
            latest.update(
                "Awaiting first move...\nPress 1-9, or use the arrows and Enter."
            )
            older.update("")
            return

        latest.update(f"★ {format_log_entry(history[-1])}")
        older.update("\n\n".join(format_log_entry(e) for e in reversed(history[:-1])))

    @on(OptionList.OptionSelected, "#action-list")
    def handle_action_selected(self, event: OptionList.OptionSelected) -> None:
        self.action_select_action(int(str(event.option.id)))

    def action_select_action(self, index: int) -> None:
        """Play the action at a menu position (0-indexed)."""
        if 0 <= index < len(self.available_actions):
            self.play(self.available_actions[index])

    def play(self, action: ActionId) -> TurnResult:
        result = self.game.submit_action(action)
        if not result.success:
            self.notify(f"Action failed: {result.error}", severity="error")
            return result

        self.update_display()
        if self.game.is_game_over():
            self.app.push_screen(
                EndGameScreen(self.game.status, result.message, result.round),
                callback=self._on_end_choice,
            )
        return result

    def _on_end_choice(self, choice: Optional[str]) -> None:
        logger.debug(f"End screen choice: {choice}")
        if choice == "again":
            self.action_restart()
        elif choice == "quit":
            self.app.exit()
        else:
            self.app.pop_screen()

    def action_restart(self) -> None:
        self.game.restart()
        self.update_display()

    def action_leave_game(self) -> None:
        """Return to main menu (abandons current match)."""
        self.app.pop_screen()


class EndGameScreen(Screen[str]):
    """Screen showing the match result. Dismisses with "again", "menu" or "quit"."""

    BINDINGS = [
        Binding("a", "play_again", "Play Again"),
        Binding("m", "main_menu", "Main Menu"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, status: GameStatus, message: str, rounds: int) -> None:
        super().__init__()
        self.status = status
        self.message = message
        self.rounds = rounds

    def compose(self) -> ComposeResult:
        if self.status == GameStatus.VICTORY:
            title, css_class = "VICTORY", "result-victory"
        elif self.status == GameStatus.DEFEAT:
            title, css_class = "DEFEAT", "result-defeat"
        else:
            title, css_class = "DRAW", "menu-title"

        yield Header()
        with Container(id="main-menu"):
            with Vertical(classes="menu-container"):
                yield Static(title, id="result-title", classes=css_class)
                yield Rule()
                yield Static(self.message)
                yield Static(f"Rounds played: {self.rounds}")
                yield Rule()
                yield Button("Play Again", id="again", variant="success", classes="menu-button")
                yield Button("Main Menu", id="menu", variant="default", classes="menu-button")
                yield Button("Quit", id="quit", variant="error", classes="menu-button")
        yield Footer()

    @on(Button.Pressed, "#again")
    def action_play_again(self) -> None:
        self.dismiss("again")

    @on(Button.Pressed, "#menu")
    def action_main_menu(self) -> None:
        self.dismiss("menu")

    @on(Button.Pressed, "#quit")
    def action_quit(self) -> None:
        self.dismiss("quit")


# =============================================================================
# Main Application
# =============================================================================


class BobozanApp(App):
    """Main Bobozan CLI application."""

    TITLE = "Bobozan"
    SUB_TITLE = "Energy combat minigame"
    CSS = CSS

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
    ]

    def on_mount(self) -> None:
        """Show main menu when app starts."""
        self.push_screen(MainMenuScreen())


def main() -> None:
    """Entry point for the CLI application.

    Environment:
        BOBOZAN_OPPONENT, BOBOZAN_SEED, BOBOZAN_INITIAL_ENERGY, BOBOZAN_LOG_LEVEL
    """
    config.configure_logging()
    app = BobozanApp()
    app.run()


if __name__ == "__main__":
    main()
