from bloodwise.services.simulation.base import Simulator
from bloodwise.services.simulation.instant import InstantSimulator
from bloodwise.services.simulation.realistic import RealisticSimulator
from bloodwise.core.config import settings

def get_simulator() -> Simulator:
    """
    Factory to return the pacing engine based on Config.
    Also used as a FastAPI dependency so tests can override it.
    """
    if settings.SIMULATE_LATENCY:
        return RealisticSimulator()

    return InstantSimulator()
