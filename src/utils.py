import os
import copy
import yaml
import logging


DEFAULT_SETTINGS = {
    'sizing': {'char_width': 2, 'encoding': None},
    'logging': {'level': 'DEBUG', 'log_file': 'logs/debug.log'},
}

# environment variable -> (section, key, cast)
ENV_OVERRIDES = {
    'LONG_STRING_CHAR_WIDTH': ('sizing', 'char_width', int),
    'LONG_STRING_ENCODING': ('sizing', 'encoding', str),
    'LONG_STRING_LOG_LEVEL': ('logging', 'level', str),
    'LONG_STRING_LOG_FILE': ('logging', 'log_file', str),
}


def load_config(path='config/config.yaml'):
    """Load YAML configuration from the given path."""
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_settings(path='config/config.yaml'):
    """Return the application settings.

    Values from the YAML file are merged over ``DEFAULT_SETTINGS`` section by
    section, then environment overrides are applied. A missing file falls back
    to the defaults.
    """
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    if os.path.exists(path):
        config = load_config(path)
        if not isinstance(config, dict):
            raise ValueError(f"{path}: expected a mapping of sections, got {type(config).__name__}")
        for section, values in config.items():
            if values is None:
                continue
            if not isinstance(values, dict):
                raise ValueError(
                    f"{path}: section '{section}' must be a mapping, got {type(values).__name__}"
                )
            settings.setdefault(section, {}).update(values)

    for var, (section, key, cast) in ENV_OVERRIDES.items():
        value = os.getenv(var)
        if value:
            settings.setdefault(section, {})[key] = cast(value)
    return settings


def configure_logger(log_file='logs/debug.log', level='DEBUG'):
    """Return the application logger writing to the specified file."""
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger('long_string')
    logger.setLevel(numeric_level)
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    target = os.path.abspath(log_file)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler) and handler.baseFilename != target:
            logger.removeHandler(handler)
            handler.close()
    has_file_handler = any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )
    if not has_file_handler:
        handler = logging.FileHandler(log_file, encoding='utf-8')
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
