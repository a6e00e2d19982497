"""
env.py - Gymnasium environment over the Connect Four engine

This module exposes a GameState through the Gymnasium Env interface so agent
code written elsewhere can play against the rules. Both players act through
the same step() call, alternating as the engine dictates.
"""

from typing import Any, Dict, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from c4engine.debug import debug
from c4engine.game.errors import MoveError
from c4engine.game.rules import GameState, new_game
from c4engine.utils import HEIGHT, WIDTH, Player, GameStatus

CELL_PIXELS = 50
PIECE_RADIUS = 20

# RGB colours for the rgb_array render mode
BACKGROUND_COLOR = (0, 0, 128)
PIECE_COLORS = {
    Player.EMPTY.value: (0, 0, 0),
    Player.ONE.value: (255, 0, 0),
    Player.TWO.value: (255, 255, 0),
}


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observations are the raw grid (0 empty, 1 player ONE, 2 player TWO).
    Rewards are given from player ONE's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None, height: int = HEIGHT, width: int = WIDTH):
        """
        Initialize the environment.

        Args:
            render_mode: One of metadata['render_modes'], or None
            height: Number of board rows
            width: Number of board columns
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.height = height
        self.width = width
        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(low=0, high=2, shape=(height, width), dtype=np.int8)

        self.state: GameState = new_game(height, width)
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01
        debug.debug(f"Initialized ConnectFourEnv {height}x{width}", "env")

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        """Start a new game and return the initial observation and info."""
        super().reset(seed=seed)
        self.state = new_game(self.height, self.width)
        debug.debug("Environment reset", "env")

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Play `action` for whichever player is to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        try:
            self.state.apply_move(action)
        except MoveError as e:
            debug.warning(f"Invalid action {action!r}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['error'] = type(e).__name__
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = self.state.is_game_over()
        if self.state.status == GameStatus.PLAYER_ONE_WIN:
            reward = self.reward_win
        elif self.state.status == GameStatus.PLAYER_TWO_WIN:
            reward = self.reward_lose
        elif self.state.status == GameStatus.TIED:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Episode over: {self.state.status.name}", "env")
        if self.render_mode == "human":
            self.render()
        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode is None:
            return None

        if self.render_mode == "ascii":
            return self.state.render()

        if self.render_mode == "human":
            print(self.state.render())
            return None

        return self._render_rgb()

    def _render_rgb(self) -> np.ndarray:
        frame = np.zeros((self.height * CELL_PIXELS, self.width * CELL_PIXELS, 3), dtype=np.uint8)
        frame[:, :] = BACKGROUND_COLOR

        # Pixel offsets from a cell centre that fall inside the piece disc
        offsets = np.arange(-PIECE_RADIUS, PIECE_RADIUS)
        dy, dx = np.meshgrid(offsets, offsets, indexing='ij')
        disc = dy ** 2 + dx ** 2 <= PIECE_RADIUS ** 2

        grid = self.state.get_state()
        half = CELL_PIXELS // 2
        for row in range(self.height):
            for col in range(self.width):
                top = row * CELL_PIXELS + half - PIECE_RADIUS
                left = col * CELL_PIXELS + half - PIECE_RADIUS
                patch = frame[top:top + 2 * PIECE_RADIUS, left:left + 2 * PIECE_RADIUS]
                patch[disc] = PIECE_COLORS[int(grid[row, col])]
        return frame

    def _get_observation(self) -> np.ndarray:
        return self.state.get_state()

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.state.valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.state.current_player.value,
            'status': self.state.status.name,
            'moves_made': self.state.move_count,
            'winning_line': self.state.winning_line(),
            'last_move': self.state.last_move,
        }

    def close(self):
        pass
