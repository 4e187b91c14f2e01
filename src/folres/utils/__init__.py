from .config import Config, ResolverConfig, get_config, reset_config, DEFAULT_CONFIG

__all__ = ["Config", "ResolverConfig", "get_config", "reset_config", "DEFAULT_CONFIG"]
