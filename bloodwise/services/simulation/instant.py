from bloodwise.services.simulation.base import Simulator

class InstantSimulator(Simulator):
    """
    No delays and a fixed outcome. Used by tests and when
    SIMULATE_LATENCY is off.
    """

    def __init__(self, outcome: bool = True):
        self.outcome = outcome
        self.pauses = []

    async def pause(self, seconds: float):
        self.pauses.append(seconds)

    async def pause_between(self, low: float, high: float):
        self.pauses.append(low)

    def chance(self, probability: float) -> bool:
        return self.outcome
