"""
WebSocket runtime for territory conquest bots.

BotClient handles the connection, the message loop and the snapshot parsing,
and hands every turn to a TurnEngine, so a strategy only has to make
decisions.

Usage:
    client = BotClient(create_strategy("ratio"), game_id="default")
    client.run()

or from the command line:
    frontline-bot [game_id] [player_id] [strategy]
"""

import asyncio
import json
import logging
import random
import string
import sys
from typing import Any, Callable, Dict, List, Optional

import websockets

from .bot import create_strategy
from .config import BotConfig, ClientConfig
from .core import AttackTransferMove, GameState, PlaceArmiesMove
from .engine import Strategy, TurnEngine

# Set up logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


class BotClient:
    """
    Connects a strategy to a game server and answers its requests
    until the game is over.
    """

    def __init__(self, strategy: Strategy, game_id: Optional[str] = None, player_id: Optional[str] = None,
                 server_url: str = ClientConfig.SERVER_URL):
        """
        Initialize the client.

        Args:
            strategy: Strategy that makes the decisions
            game_id: ID of the game to join (if None, will join the default game)
            player_id: Unique player name; a random one is generated if omitted
            server_url: WebSocket URL of the game server
        """
        if not player_id:
            random_string = ''.join(random.choices(string.ascii_lowercase + string.digits, k=4))
            player_id = str(strategy.__class__.__name__) + " " + random_string

        self.engine = TurnEngine(strategy)
        self.player_id = player_id
        self.game_id = game_id if game_id is not None else ClientConfig.DEFAULT_GAME_ID
        self.server_url = server_url
        self.websocket = None
        self.game_state: Optional[GameState] = None
        self.running = False

        self.on_game_ended: Optional[Callable[[Dict], None]] = None

        logger.info(f"Bot {self.player_id} initialized for game {self.game_id}")

    async def connect(self) -> bool:
        """Open the websocket and ask to join ``game_id``."""
        try:
            self.websocket = await websockets.connect(self.server_url)
        except Exception as e:
            logger.error(f"[{self.player_id}] Could not reach {self.server_url}: {e}")
            return False

        joined = await self.send({"type": "join_as_bot", "player_id": self.player_id, "game_id": self.game_id})
        if joined:
            logger.info(f"[{self.player_id}] Joining game {self.game_id} at {self.server_url}")
        return joined

    async def disconnect(self):
        if self.websocket:
            await self.websocket.close()
            self.websocket = None

    async def send(self, message: Dict[str, Any]) -> bool:
        """Send a JSON message to the server."""
        if not self.websocket:
            return False

        try:
            await self.websocket.send(json.dumps(message))
            return True
        except Exception as e:
            logger.error(f"[{self.player_id}] Failed to send {message.get('type')}: {e}")
            return False

    async def send_moves(self, placements: List[PlaceArmiesMove],
                         attack_transfers: List[AttackTransferMove]) -> None:
        """Send the turn's orders to the server."""
        message = {
            "type": "move_command",
            "placements": [move.to_dict() for move in placements],
            "attack_transfers": [move.to_dict() for move in attack_transfers]
        }
        if await self.send(message):
            logger.debug(f"[{self.player_id}] Sent {len(placements)} placements "
                         f"and {len(attack_transfers)} attacks/transfers")

    async def handle_message(self, message: Dict[str, Any]) -> None:
        """
        Answer one server message.

        Draft requests are answered with a region, snapshots with the turn's
        orders. A snapshot that cannot be parsed or planned still gets an
        empty answer so the match can go on.
        """
        message_type = message.get("type")

        if message_type == "pick_starting_region":
            try:
                region_id = self.engine.pick_starting_region(GameState(message, self.player_id))
            except Exception as e:
                logger.error(f"[{self.player_id}] Error picking starting region: {e}")
                region_id = None

            if region_id is None:
                logger.warning(f"[{self.player_id}] No starting region to pick")
                return
            await self.send({"type": "starting_region", "region": region_id})

        elif message_type == "game_state":
            try:
                self.game_state = GameState(message, self.player_id)
                placements, attack_transfers = self.engine.play_turn(self.game_state)
            except Exception as e:
                logger.error(f"[{self.player_id}] Error planning round {message.get('round')}: {e}")
                placements, attack_transfers = [], []
            await self.send_moves(placements, attack_transfers)

        elif message_type == "game_over":
            logger.info(f"[{self.player_id}] Game over, rankings: {message.get('final_rankings', [])}")
            if self.on_game_ended:
                self.on_game_ended(message)
            self.running = False

        elif message_type == "game_reset":
            self.game_state = None

        elif message_type == "error":
            logger.warning(f"[{self.player_id}] Server error: {message.get('message', 'Unknown error')}")

        else:
            logger.debug(f"[{self.player_id}] Unknown message type: {message_type}")

    async def game_loop(self) -> None:
        """Answer server messages until the game is over or the connection drops."""
        try:
            while self.running:
                try:
                    raw = await asyncio.wait_for(self.websocket.recv(), timeout=ClientConfig.RECV_TIMEOUT)
                    await self.handle_message(json.loads(raw))

                except asyncio.TimeoutError:
                    logger.warning(f"[{self.player_id}] No message for {ClientConfig.RECV_TIMEOUT}s, leaving")
                    break

                except websockets.exceptions.ConnectionClosed:
                    logger.info(f"[{self.player_id}] Connection closed by server")
                    break

                except json.JSONDecodeError as e:
                    logger.warning(f"[{self.player_id}] Ignoring malformed message: {e}")

        except Exception as e:
            logger.error(f"[{self.player_id}] Game loop error: {e}")
        finally:
            self.running = False

    def run(self) -> None:
        """Run the bot (blocking call)."""
        asyncio.run(self._run_async())

    async def _run_async(self) -> None:
        self.running = True
        try:
            if await self.connect():
                await self.game_loop()
        finally:
            self.running = False
            await self.disconnect()
            logger.info(f"[{self.player_id}] Bot terminated")


def main():
    game_id = sys.argv[1] if len(sys.argv) > 1 else None
    player_id = sys.argv[2] if len(sys.argv) > 2 else None
    strategy_name = sys.argv[3] if len(sys.argv) > 3 else BotConfig.DEFAULT_STRATEGY

    client = BotClient(create_strategy(strategy_name), game_id, player_id)
    client.run()


if __name__ == "__main__":
    main()
