from .config import ScalebookConfig, get_config, load_config, validate_config  # noqa: F401
