"""
Evaluation script for scripted policies on the Flappy Luxe environment
"""

import argparse
from typing import Callable, Optional

import numpy as np

from game.flappy import FlappyEnv
from rl.configs.flappy_config import ENV_CONFIG, EVAL_CONFIG, GAME_CONFIGS


def random_policy(flap_prob: float = 0.08, seed: Optional[int] = None) -> Callable:
    """Flap with a fixed probability each step"""
    rng = np.random.default_rng(seed)

    def act(obs: np.ndarray) -> int:
        return int(rng.random() < flap_prob)

    return act


def heuristic_policy(margin: float = 0.02) -> Callable:
    """
    Flap whenever the bird sinks below the lower part of the next gap.
    obs[4]/obs[5] are the gap top/bottom relative to the bird (positive = below).
    """

    def act(obs: np.ndarray) -> int:
        gap_bottom_dy = obs[5]
        vy = obs[1]
        return int(gap_bottom_dy < 0.06 + margin and vy > -0.2)

    return act


def evaluate_policy(
    policy: Callable,
    n_episodes: int = 10,
    seed: Optional[int] = None,
    game_config: Optional[dict] = None,
    render: bool = False,
):
    """Run `n_episodes` episodes and summarise rewards, lengths and scores"""
    env = FlappyEnv(render_mode="human" if render else None, game_config=game_config, **ENV_CONFIG)

    episode_rewards = []
    episode_lengths = []
    episode_scores = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = policy(obs)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info["score"])

    env.close()

    return {
        "mean_reward": float(np.mean(episode_rewards)),
        "std_reward": float(np.std(episode_rewards)),
        "mean_length": float(np.mean(episode_lengths)),
        "mean_score": float(np.mean(episode_scores)),
        "max_score": int(np.max(episode_scores)),
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
        "episode_scores": episode_scores,
    }


def print_results(name: str, results: dict, n_episodes: int):
    print("\n" + "=" * 50)
    print(f"{name} policy ({n_episodes} episodes):")
    print(f"Mean Reward: {results['mean_reward']:.2f} ± {results['std_reward']:.2f}")
    print(f"Mean Episode Length: {results['mean_length']:.1f}")
    print(f"Mean Score: {results['mean_score']:.2f}  (max {results['max_score']})")
    print("=" * 50)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate scripted policies on FlappyEnv")
    parser.add_argument(
        "--policy",
        type=str,
        default="heuristic",
        choices=EVAL_CONFIG["policies"],
        help="Policy to evaluate (default: heuristic)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_eval_episodes"],
        help=f"Number of evaluation episodes (default: {EVAL_CONFIG['n_eval_episodes']})",
    )
    parser.add_argument(
        "--preset",
        type=str,
        default="normal",
        choices=sorted(GAME_CONFIGS),
        help="Game config preset (default: normal)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Watch the episodes in a window",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seeds"][0],
        help=f"Random seed (default: {EVAL_CONFIG['seeds'][0]})",
    )
    parser.add_argument(
        "--compare-random",
        action="store_true",
        help="Also evaluate the random policy for comparison",
    )
    return parser


def main(argv: Optional[list] = None):
    args = build_parser().parse_args(argv)
    game_config = GAME_CONFIGS[args.preset]

    policy = heuristic_policy() if args.policy == "heuristic" else random_policy(seed=args.seed)
    results = evaluate_policy(
        policy,
        n_episodes=args.n_episodes,
        seed=args.seed,
        game_config=game_config,
        render=args.render,
    )
    print_results(args.policy, results, args.n_episodes)

    if args.compare_random and args.policy != "random":
        random_results = evaluate_policy(
            random_policy(seed=args.seed),
            n_episodes=args.n_episodes,
            seed=args.seed,
            game_config=game_config,
        )
        print_results("random", random_results, args.n_episodes)
        improvement = results["mean_reward"] - random_results["mean_reward"]
        print(f"\nImprovement over random: {improvement:.2f}")


if __name__ == "__main__":
    main()
