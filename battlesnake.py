import logging
import random
from typing import Any, Optional

from flask import Flask, jsonify, request
from pydantic import ValidationError

from models import Direction, GameState, Move, SnakeInfo

logger = logging.getLogger(__name__)

SNAKE_INFO = SnakeInfo(
    apiversion="1",
    author="",
    color="#888888",
    head="default",
    tail="default",
)


class BattlesnakeLogic:
    def __init__(self, rng: Optional[random.Random] = None):
        # Move directions
        self.directions = list(Direction)
        # Falls back to the random module's shared generator
        self.rng = rng or random

    def get_move(self, game_state: Any = None) -> Direction:
        """Pick a direction uniformly at random. The game state is not inspected."""
        return self.rng.choice(self.directions)

    def get_response(self, game_state: Any = None) -> Move:
        return Move(move=self.get_move(game_state))


def parse_game_state(payload: Any) -> Optional[GameState]:
    """Parse a request body into a GameState.

    Returns None instead of raising when the body does not match the schema,
    since none of the handlers depend on its contents.
    """
    try:
        return GameState.model_validate(payload)
    except ValidationError as e:
        logger.debug("Request body is not a valid game state: %s", e)
        return None


def read_request_body() -> Any:
    """JSON body of the current request. An empty body reads as {}."""
    if not request.get_data():
        return {}
    return request.get_json(force=True)


# Flask server integration
def create_battlesnake_server(snake_logic: Optional[BattlesnakeLogic] = None) -> Flask:
    """Create Flask server for Battlesnake"""
    app = Flask(__name__)
    if snake_logic is None:
        snake_logic = BattlesnakeLogic()

    @app.route('/')
    def info():
        return jsonify(SNAKE_INFO.to_json())

    @app.route('/start', methods=['POST'])
    def start():
        game_state = parse_game_state(read_request_body())
        if game_state is not None:
            logger.info("START game=%s", game_state.game.id)
        else:
            logger.info("START")
        return "ok"

    @app.route('/move', methods=['POST'])
    def move():
        game_state = parse_game_state(read_request_body())
        response = snake_logic.get_response(game_state)
        logger.info("MOVE: %s", response.move.value)
        return jsonify(response.to_json())

    @app.route('/end', methods=['POST'])
    def end():
        game_state = parse_game_state(read_request_body())
        if game_state is not None:
            logger.info("END game=%s turn=%d", game_state.game.id, game_state.turn)
        else:
            logger.info("END")
        return "ok"

    return app
