"""
Training Job - Run Q-learning on a background thread.

The worker owns the strategy while it trains. The only thing crossing the
thread boundary is a queue of progress fractions in (0, 1].
"""

import logging
import queue
import threading
from typing import Optional

from othello_ai.qlearning import QLearningStrategy

logger = logging.getLogger(__name__)


class TrainingJob:
    def __init__(self, strategy: QLearningStrategy, start: bool = True):
        self.strategy = strategy
        self.progress_queue: queue.Queue = queue.Queue()
        self.progress = 0.0
        self.error: Optional[BaseException] = None
        self._thread = threading.Thread(target=self._run, name="q-learning-trainer",
                                        daemon=True)
        if start:
            self.start()

    def start(self):
        self._thread.start()

    def _run(self):
        try:
            self.strategy.train(self.progress_queue)
        except Exception as e:
            logger.error(f"Training failed: {e}")
            self.error = e

    def poll(self) -> float:
        """Drain pending progress updates without blocking and return the latest."""
        while True:
            try:
                self.progress = self.progress_queue.get_nowait()
            except queue.Empty:
                return self.progress

    @property
    def done(self) -> bool:
        return self._thread.ident is not None and not self._thread.is_alive()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the worker. Returns True once it has finished."""
        self._thread.join(timeout)
        return not self._thread.is_alive()
