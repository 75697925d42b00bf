"""
Configuration presets for the Flappy Luxe game and its RL environment
"""

# Gameplay tunables (keys of game.flappy.GameConfig); omitted keys keep their defaults
GAME_CONFIG = {
    "gravity": 900.0,
    "flap_velocity": -280.0,
    "spawn_interval": 1.45,
    "max_gap": 200.0,
    "min_gap": 140.0,
    "gap_saturation_score": 25,
    "base_speed": 160.0,
    "first_fruit_score": 5,
    "fruit_score_step": 50,
    "invincible_pipes": 10,
}

# A gentler preset for demos and for warming up agents
GAME_CONFIG_EASY = {
    **GAME_CONFIG,
    "max_gap": 240.0,
    "min_gap": 180.0,
    "base_speed": 130.0,
    "speed_per_point": 4.0,
}

GAME_CONFIGS = {
    "normal": GAME_CONFIG,
    "easy": GAME_CONFIG_EASY,
}

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # rendering slows evaluation down a lot
    "width": 480,
    "height": 720,
    "dt": 1/30,
    "max_steps": 3000,  # 100 seconds at 30 FPS
    "reward_pipe": 1.0,
    "reward_alive": 0.01,
    "reward_death": 1.0,
}

EVAL_CONFIG = {
    "seeds": [42, 123, 456],
    "n_eval_episodes": 10,
    "policies": ["random", "heuristic"],
}
