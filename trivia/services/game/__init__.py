"""Game domain services: round creation and round resolution.

A round is created awaiting an answer and resolved exactly once; the
resolution and the user's balance update are committed as one unit.
"""

from .selection import start_round
from .resolution import submit_answer

__all__ = ['start_round', 'submit_answer']
