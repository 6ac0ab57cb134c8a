from abc import ABC, abstractmethod

class Simulator(ABC):
    """
    Source of artificial latency and coin flips for the demo flows
    (upload processing, report verification, chat pacing).
    """

    @abstractmethod
    async def pause(self, seconds: float):
        pass

    @abstractmethod
    async def pause_between(self, low: float, high: float):
        pass

    @abstractmethod
    def chance(self, probability: float) -> bool:
        pass
