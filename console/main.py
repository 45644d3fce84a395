"""Main entry point for console Blackjack."""

import logging
import sys
from random import Random

from config import AppConfig, config
from console.renderer import render_outcome, render_score, render_table
from console.terminal import Terminal
from engine.cards import DeckExhaustedError
from engine.game.engine import Action, BlackjackGame
from engine.game.events import EventType, GameEvent

logger = logging.getLogger(__name__)

# Events after which the table is redrawn
REDRAW_EVENTS = (
    EventType.ROUND_STARTED,
    EventType.PLAYER_HIT,
    EventType.DEALER_HITS,
    EventType.ROUND_ENDED,
)


class Application:
    """Session loop: one game, rounds until the player quits."""

    def __init__(
        self,
        app_config: AppConfig = config,
        terminal: Terminal | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize the application.

        Args:
            app_config: Configuration to run with
            terminal: Console to talk through (stdin/stdout if not provided)
            rng: Random number generator, seeded from the config if not provided
        """
        self.config = app_config
        self.terminal = terminal or Terminal(clear_screen=app_config.console.clear_screen)

        rules = app_config.game
        if rng is None and rules.seed is not None:
            rng = Random(rules.seed)

        self.game = BlackjackGame(
            dealer_stands_on=rules.dealer_stands_on,
            reshuffle_policy=rules.reshuffle_policy,
            reshuffle_threshold=rules.reshuffle_threshold,
            rng=rng,
        )
        for event_type in REDRAW_EVENTS:
            self.game.subscribe(self._redraw, event_type)

    def _redraw(self, event: GameEvent) -> None:
        """Clear the screen and draw both hands."""
        self.terminal.clear()
        self.terminal.write(render_table(self.game))

    def _decide(self, game: BlackjackGame) -> Action:
        """Ask the player what to do next."""
        return self.terminal.ask_hit_or_stand()

    def _show_score(self) -> None:
        self.terminal.write()
        self.terminal.say(render_score(self.game.score))

    def run(self) -> int:
        """
        Play rounds until the player quits.

        Returns:
            Process exit status
        """
        try:
            if self.config.console.ask_name:
                self.game.player.name = self.terminal.ask_player_name()

            while True:
                outcome = self.game.play_round(self._decide)
                self.terminal.say(render_outcome(outcome))
                self._show_score()
                if not self.terminal.ask_play_again():
                    break
        except DeckExhaustedError as exc:
            self.terminal.say(f"Round aborted: {exc}")
            return 1
        except (KeyboardInterrupt, EOFError):
            logger.debug("Input closed, ending session")
            self._show_score()

        return 0


def main() -> None:
    """Entry point for the console game."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.effective_log_level,
    )
    app = Application()
    sys.exit(app.run())


if __name__ == "__main__":
    main()
