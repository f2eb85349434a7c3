import random
from typing import Optional

from ..config import BotConfig
from ..engine import Strategy
from .ratio import RatioBot
from .scatter import ScatterBot

STRATEGY_CLASSES = {
    "ratio": RatioBot,
    "scatter": ScatterBot,
}


def create_strategy(name: str = BotConfig.DEFAULT_STRATEGY,
                    rng: Optional[random.Random] = None) -> Strategy:
    """
    Build a strategy by name.

    Raises:
        ValueError: If the name is not one of BotConfig.STRATEGIES
    """
    if name not in BotConfig.STRATEGIES or name not in STRATEGY_CLASSES:
        raise ValueError(f"Unknown strategy: {name} (expected one of {', '.join(BotConfig.STRATEGIES)})")
    return STRATEGY_CLASSES[name](rng=rng)
