import numpy as np
import pytest

from game.flappy import FlappyEnv
from rl.configs.flappy_config import ENV_CONFIG, EVAL_CONFIG
from rl.evaluate import build_parser, evaluate_policy, heuristic_policy, random_policy


@pytest.fixture
def env():
    env = FlappyEnv(**ENV_CONFIG)
    yield env
    env.close()


def test_reset_observation(env):
    obs, info = env.reset(seed=0)
    assert obs.shape == (8,)
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0
    assert info["step"] == 0


def test_dt_is_capped_to_controller_clamp(env):
    assert env.dt == pytest.approx(0.033)


def test_gliding_bird_hits_the_ground(env):
    env.reset(seed=0)
    rewards = []
    terminated = truncated = False
    while not (terminated or truncated):
        obs, reward, terminated, truncated, info = env.step(0)
        rewards.append(reward)
        assert env.observation_space.contains(obs)
    assert terminated
    assert not truncated
    assert len(rewards) < 40
    assert rewards[0] == pytest.approx(0.01)
    assert rewards[-1] == pytest.approx(0.01 - 1.0)


def test_same_seed_same_trajectory():
    actions = [1 if i % 9 == 0 else 0 for i in range(60)]
    runs = []
    for _ in range(2):
        env = FlappyEnv(**ENV_CONFIG)
        obs, _ = env.reset(seed=11)
        trace = [obs]
        for a in actions:
            obs, _, terminated, truncated, _ = env.step(a)
            trace.append(obs)
            if terminated or truncated:
                break
        runs.append(np.stack(trace))
        env.close()
    np.testing.assert_array_equal(runs[0], runs[1])


def test_truncates_at_max_steps():
    env = FlappyEnv(max_steps=5)
    env.reset(seed=1)
    truncated = False
    for _ in range(5):
        _, _, terminated, truncated, _ = env.step(0)
    assert truncated
    assert not terminated


def test_flap_action_lifts_bird(env):
    obs, _ = env.reset(seed=2)
    obs, *_ = env.step(1)
    assert obs[1] < 0


def test_evaluate_policy_summary():
    results = evaluate_policy(random_policy(seed=0), n_episodes=2, seed=5)
    assert len(results["episode_rewards"]) == 2
    assert results["max_score"] >= 0
    assert results["mean_length"] > 0


def heuristic_obs(vy, gap_bottom_dy):
    obs = np.zeros(8, dtype=np.float32)
    obs[1] = vy
    obs[5] = gap_bottom_dy
    return obs


def test_heuristic_flaps_when_sinking_near_gap_bottom():
    policy = heuristic_policy()
    assert policy(heuristic_obs(vy=0.3, gap_bottom_dy=0.03)) == 1


def test_heuristic_glides_well_above_gap_bottom():
    policy = heuristic_policy()
    assert policy(heuristic_obs(vy=0.3, gap_bottom_dy=0.25)) == 0


def test_heuristic_does_not_flap_while_rising_fast():
    policy = heuristic_policy()
    assert policy(heuristic_obs(vy=-0.5, gap_bottom_dy=0.03)) == 0


def test_evaluate_defaults_come_from_eval_config():
    args = build_parser().parse_args([])
    assert args.n_episodes == EVAL_CONFIG["n_eval_episodes"]
    assert args.seed == EVAL_CONFIG["seeds"][0]
    assert args.policy in EVAL_CONFIG["policies"]
