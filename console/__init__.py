"""Text console for playing against the engine."""
