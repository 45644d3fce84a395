"""Running score for a session."""

from dataclasses import dataclass

from engine.outcome import Outcome, Result


@dataclass
class ScoreTracker:
    """Win/loss/tie counters, kept for the life of the process."""

    wins: int = 0
    losses: int = 0
    ties: int = 0

    def record(self, outcome: Outcome) -> Result:
        """
        Count one finished round.

        Args:
            outcome: How the round ended

        Returns:
            The score column that was incremented
        """
        result = outcome.result
        if result == Result.WIN:
            self.wins += 1
        elif result == Result.LOSS:
            self.losses += 1
        else:
            self.ties += 1
        return result

    @property
    def rounds_played(self) -> int:
        """Return the number of rounds recorded."""
        return self.wins + self.losses + self.ties

    def as_dict(self) -> dict[str, int]:
        """Return the counters keyed by column name."""
        return {"wins": self.wins, "losses": self.losses, "ties": self.ties}

    def __str__(self) -> str:
        return f"Wins: {self.wins}    Losses: {self.losses}    Ties: {self.ties}"
