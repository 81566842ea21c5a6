"""
scoring.py: Per-run scoring and the persisted best score.
"""

import logging
from typing import Optional

from .config import GameConfig
from .data_models import Session
from .score_db import ScoreStore

logger = logging.getLogger(__name__)


class Scorer:
    """
    Awards one point per cleared pipe and keeps the best score.

    The best score is read once at construction and only ever raised.
    """

    def __init__(self, config: GameConfig, store: Optional[ScoreStore] = None):
        self.config = config
        self.store = store
        self.best_score = store.load_best(config.best_score_key) if store else 0

    def award(self, session: Session) -> int:
        """Scores every unscored pipe whose right edge is strictly left of the bird."""
        gained = 0
        bird_x = session.bird.x
        for pipe in session.pipes:
            if not pipe.scored and pipe.right < bird_x:
                pipe.scored = True
                session.score += 1
                gained += 1
        return gained

    def finalize(self, score: int) -> bool:
        """Records the end of a run. Returns True if it set a new best."""
        if score <= self.best_score:
            return False
        self.best_score = score
        if self.store is not None:
            self.store.save_best(self.config.best_score_key, score)
        logger.info("New best score: %d", score)
        return True
