import asyncio
import random
from typing import Optional

import structlog

from bloodwise.services.simulation.base import Simulator

logger = structlog.get_logger()

class RealisticSimulator(Simulator):
    """
    Sleeps for real and rolls real dice, so the UI feels like it is
    talking to a lab system.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    async def pause(self, seconds: float):
        if seconds > 0:
            await asyncio.sleep(seconds)

    async def pause_between(self, low: float, high: float):
        await self.pause(self._rng.uniform(low, high))

    def chance(self, probability: float) -> bool:
        outcome = self._rng.random() < probability
        logger.debug("simulated_chance", probability=probability, outcome=outcome)
        return outcome
