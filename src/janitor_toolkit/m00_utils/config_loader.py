"""
config_loader.py

Utility for loading structured YAML configuration files used by the
tabulation and duplicates runners.
"""
import yaml


def load_config(config_path: str):
    """
    Load a YAML configuration file and return the full config.

    Args:
        config_path (str): Path to the YAML config file.

    Returns:
        dict: The full configuration dictionary (empty if the file is empty).
    """
    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    return config or {}


def get_module_block(config: dict, module_name: str) -> dict:
    """
    Return the block for `module_name` whether the full config or the block
    itself was passed in.
    """
    if module_name in config:
        return config.get(module_name) or {}
    return config
