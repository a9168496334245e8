from .config_loader import CONFIG_ENV_VAR, UmlConfig, get_config_path, load_config

__all__ = ["CONFIG_ENV_VAR", "UmlConfig", "get_config_path", "load_config"]
