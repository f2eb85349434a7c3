# ===== PLANNER SETTINGS =====
class PlannerConfig:
    """Thresholds used by the turn planners."""

    # Attack decision
    ATTACK_RATIO_THRESHOLD = 2.0  # attacker / defender armies
    MIN_ATTACK_ARMIES = 5

    # Placement
    PLACEMENT_INCREMENT = 2

    # Frontline distance flood fill
    MAX_PROPAGATION_ROUNDS = 10


# ===== BOT MANAGEMENT =====
class BotConfig:
    """Strategy selection."""

    # Available strategies
    STRATEGIES = ["ratio", "scatter"]
    DEFAULT_STRATEGY = "ratio"

    # Scatter strategy
    SCATTER_PLACEMENT_ARMIES = 2
    SCATTER_ATTACK_MIN = 6  # attack only with more armies than this
    SCATTER_MOVE_ARMIES = 5
    SCATTER_MAX_TRANSFERS = 10


# ===== CLIENT CONFIGURATION =====
class ClientConfig:
    """WebSocket client configuration."""
    SERVER_URL = "ws://localhost:8765"
    DEFAULT_GAME_ID = "default"

    RECV_TIMEOUT = 60.0  # seconds
    DEFAULT_TIMEOUT_MS = 2000  # turn budget when the snapshot carries none
