"""Console input and output for the game."""

from typing import Callable

from engine.game.engine import Action

PROMPT_PREFIX = "=> "
CLEAR_SEQUENCE = "\033[2J\033[H"

HIT_OR_STAND_PROMPT = "(h)it or (s)tand:"
PLAY_AGAIN_PROMPT = "Press enter to play another hand (q to quit): "
NAME_PROMPT = "Enter your name:"

InputProvider = Callable[[str], str]
OutputWriter = Callable[[str], None]


class Terminal:
    """
    Blocking text console.

    Reading and writing go through injectable callables so a session can
    be scripted.
    """

    def __init__(
        self,
        read: InputProvider = input,
        write: OutputWriter = print,
        clear_screen: bool = True,
    ) -> None:
        """
        Initialize the terminal.

        Args:
            read: Called with a prompt, returns the raw line typed
            write: Called with each line of output
            clear_screen: Clear the screen before each redraw
        """
        self._read = read
        self._write = write
        self.clear_screen = clear_screen

    def ask(self, message: str) -> str:
        """Prompt and return the raw answer."""
        return self._read(f"{PROMPT_PREFIX}{message} ")

    def say(self, message: str) -> None:
        """Print a message with the prompt prefix."""
        self._write(f"{PROMPT_PREFIX}{message}")

    def write(self, text: str = "") -> None:
        """Print text as is."""
        self._write(text)

    def clear(self) -> None:
        """Clear the screen if enabled."""
        if self.clear_screen:
            self._write(CLEAR_SEQUENCE)

    def ask_hit_or_stand(self) -> Action:
        """Ask until the answer is h or s."""
        while True:
            choice = self.ask(HIT_OR_STAND_PROMPT).strip().lower()
            if choice == Action.HIT.value:
                return Action.HIT
            if choice == Action.STAND.value:
                return Action.STAND

    def ask_play_again(self) -> bool:
        """Return False only when the player types q."""
        self.write()
        return self.ask(PLAY_AGAIN_PROMPT).strip().lower() != "q"

    def ask_player_name(self, default: str = "Player") -> str:
        """Ask for the player's name, falling back to the default."""
        return self.ask(NAME_PROMPT).strip() or default
