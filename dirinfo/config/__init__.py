from .config import Config, apply_env_overrides, default_config, expand_config_home, load_from_file

__all__ = [
    "Config",
    "apply_env_overrides",
    "default_config",
    "expand_config_home",
    "load_from_file",
]
