from .core import GameSession, Outcome, play
from .render import render_guess

__all__ = ["GameSession", "Outcome", "play", "render_guess"]
