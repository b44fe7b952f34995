from __future__ import annotations

import gymnasium as gym
import numpy as np

import falling_block_rl.env  # noqa: F401
from falling_block_rl.env.falling_block_env import FallingBlockEnv
from falling_block_rl.game import HEIGHT, WIDTH, Action, Block, Color, GameConfig, Piece, TetrominoType


def test_registered_env_resets():
    env = gym.make("FallingBlock-16x10-v0")
    obs, info = env.reset(seed=3)
    assert obs.shape == (HEIGHT, WIDTH)
    assert obs.dtype == np.int8
    assert info["score"] == 0
    assert env.action_space.n == int(Action.PAUSE)
    env.close()


def test_step_rewards_cleared_rows():
    env = FallingBlockEnv(GameConfig(random_seed=0))
    env.reset(seed=0)
    game = env.game
    for col in range(WIDTH):
        if not 4 <= col <= 7:
            game.grid[HEIGHT - 1, col] = Block(1, Color.GREEN)
    game.piece = Piece(TetrominoType.I, 240, game.grid.copy())
    game.fall_counter = 4

    obs, reward, terminated, truncated, info = env.step(int(Action.HARD_DROP))

    assert reward == float(WIDTH)
    assert not terminated
    assert not truncated
    assert info["rows_cleared_total"] == 1


def test_hard_drops_end_the_episode():
    env = FallingBlockEnv(GameConfig(random_seed=11))
    env.reset(seed=11)
    terminated = False
    for _ in range(5000):
        _, _, terminated, truncated, _ = env.step(int(Action.HARD_DROP))
        if terminated or truncated:
            break
    assert terminated
    assert env.game.game_over


def test_truncates_at_step_limit():
    env = FallingBlockEnv(GameConfig(random_seed=2, max_episode_steps=3))
    env.reset()
    results = [env.step(int(Action.NONE)) for _ in range(3)]
    assert [r[3] for r in results] == [False, False, True]


def test_rgb_render():
    env = FallingBlockEnv(GameConfig(random_seed=4), render_mode="rgb_array")
    env.reset()
    img = env.render()
    assert img.shape == (HEIGHT * 12, WIDTH * 12, 3)
    assert img.dtype == np.uint8
