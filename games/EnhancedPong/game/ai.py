"""Adaptive AI opponent.

The AI paddle steers toward the ball with a personality-dependent bias,
a reaction coefficient and a per-tick speed cap. All three are derived
from the score differential each time adapt() runs, so the AI tightens up
when the player pulls ahead and relaxes when it leads.
"""

import random
from dataclasses import dataclass

from models.pong import Personality

from ..config import (
    AI_INITIAL_MAX_SPEED, AI_INITIAL_REACTION,
    AI_BASE_MAX_SPEED, AI_BASE_REACTION,
    AI_MAX_SPEED_CAP, AI_MAX_SPEED_FLOOR,
    AI_REACTION_CAP, AI_REACTION_FLOOR,
    AI_AGGRESSIVE_LEAD, AI_DEFENSIVE_DEFICIT,
    AI_AGGRESSIVE_BIAS, AI_DEFENSIVE_BIAS,
    AI_CONFUSED_JITTER,
)
from .entities.ball import round_half_up


def personality_for(player_score: int, ai_score: int) -> Personality:
    """Pick the AI personality for a score line.

    Aggressive once the player leads by 3 or more, defensive once the AI
    leads by 2 or more, normal otherwise.
    """
    diff = player_score - ai_score
    if diff >= AI_AGGRESSIVE_LEAD:
        return Personality.AGGRESSIVE
    if diff <= -AI_DEFENSIVE_DEFICIT:
        return Personality.DEFENSIVE
    return Personality.NORMAL


@dataclass
class AIState:
    """Derived AI tuning: personality, speed cap and reaction coefficient."""

    personality: Personality = Personality.NORMAL
    max_speed: float = AI_INITIAL_MAX_SPEED
    reaction: float = AI_INITIAL_REACTION

    def adapt(self, player_score: int, ai_score: int) -> None:
        """Recompute tuning from the score.

        Player lead L > 0:  max_speed = 4.5 + min(3.0, 0.6 L)
                            reaction  = 0.12 + min(0.25, 0.03 L)
        AI lead D >= 0:     max_speed = max(3.0, 4.5 - min(2.0, 0.3 D))
                            reaction  = max(0.08, 0.12 - min(0.04, 0.01 D))

        Calling it again with the same score leaves the state unchanged.
        """
        lead = player_score - ai_score
        if lead > 0:
            max_speed = AI_BASE_MAX_SPEED + min(3.0, lead * 0.6)
            reaction = AI_BASE_REACTION + min(0.25, lead * 0.03)
        else:
            deficit = -lead
            max_speed = max(AI_MAX_SPEED_FLOOR, AI_BASE_MAX_SPEED - min(2.0, deficit * 0.3))
            reaction = max(AI_REACTION_FLOOR, AI_BASE_REACTION - min(0.04, deficit * 0.01))

        self.max_speed = min(AI_MAX_SPEED_CAP, max_speed)
        self.reaction = min(AI_REACTION_CAP, reaction)
        self.personality = personality_for(player_score, ai_score)


def next_ai_position(
    ball_center_y: float,
    ball_vy: float,
    paddle_y: float,
    paddle_height: float,
    personality: Personality,
    max_speed: float,
    reaction: float,
    confused: bool,
    rng: random.Random,
) -> float:
    """Compute the AI paddle's next top Y (before field clamping).

    Confused: a uniform random integer jitter in [-3, 3], no tracking.
    Otherwise the paddle center aims at the ball center, shifted 20px
    along the ball's vertical travel when aggressive or 10px against it
    when defensive, and closes reaction * distance of the gap, rounded,
    never more than max_speed per tick.

    Args:
        ball_center_y: Primary ball center Y
        ball_vy: Primary ball vertical velocity
        paddle_y: Current AI paddle top Y
        paddle_height: Current AI paddle height
        personality: AI personality
        max_speed: Per-tick movement cap
        reaction: Fraction of the gap closed per tick
        confused: Whether the confuse effect is active
        rng: Random source for the confused jitter

    Returns:
        New paddle top Y
    """
    if confused:
        return paddle_y + rng.randint(-AI_CONFUSED_JITTER, AI_CONFUSED_JITTER)

    target = ball_center_y - paddle_height / 2.0
    if personality == Personality.AGGRESSIVE:
        target += AI_AGGRESSIVE_BIAS if ball_vy > 0 else -AI_AGGRESSIVE_BIAS
    elif personality == Personality.DEFENSIVE:
        target += -AI_DEFENSIVE_BIAS if ball_vy > 0 else AI_DEFENSIVE_BIAS

    delta = round_half_up((target - paddle_y) * reaction)
    delta = max(-max_speed, min(max_speed, delta))
    return paddle_y + delta
