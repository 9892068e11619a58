from .scoring import Verdict, evaluate, score, to_pattern, is_solved
from .validation import validate_guess

__all__ = ["Verdict", "evaluate", "score", "to_pattern", "is_solved", "validate_guess"]
