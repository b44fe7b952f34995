from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_block_rl.game import HEIGHT, WIDTH, Action, FallingBlockGame, GameConfig, GameOver, TetrominoType
from falling_block_rl.visualization.palette import rgb_for


# Agents cannot pause; PAUSE is the last action and stays out of the space
AGENT_ACTIONS = int(Action.PAUSE)


class FallingBlockEnv(gym.Env):
    """One step applies an action and then advances the game by one tick.

    Observation is the grid with the falling piece overlaid as `-kind`.
    Reward is the score gained during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 10}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None) -> None:
        super().__init__()
        self.game = FallingBlockGame(config)
        self.render_mode = render_mode
        self.observation_space = spaces.Box(
            low=-len(TetrominoType), high=1, shape=(HEIGHT, WIDTH), dtype=np.int8
        )
        self.action_space = spaces.Discrete(AGENT_ACTIONS)
        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "rows_cleared_total": self.game.rows_cleared_total,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._steps = 0
        return self.game.get_state(), self._get_info()

    def step(self, action: int):
        score_before = self.game.score
        terminated = False
        truncated = False

        self.game.apply(Action(int(action)))
        try:
            self.game.tick()
        except GameOver:
            terminated = True

        self._steps += 1
        if self._steps >= self.game.config.max_episode_steps:
            truncated = True

        reward = float(self.game.score - score_before)
        return self.game.get_state(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        cell = 12
        grid = self.game.grid
        img = np.zeros((grid.height * cell, grid.width * cell, 3), dtype=np.uint8)
        for y, row in enumerate(grid.rows()):
            for x, block in enumerate(row):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = rgb_for(block.color)
        if not self.game.game_over:
            for y, x in self.game.piece.cells():
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = rgb_for(self.game.piece.color)
        return img

    def close(self) -> None:
        pass
