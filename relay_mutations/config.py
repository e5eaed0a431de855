from typing import Optional

import environ

from .constants import RESERVED_NAME_POLICIES, RESERVED_NAME_POLICY_REJECT
from .exceptions import ImproperlyConfiguredMutation

CONFIG_TEMPLATE = {
    "RELAY_MUTATIONS_RESERVED_NAME_POLICY": (str, RESERVED_NAME_POLICY_REJECT),
    "RELAY_MUTATIONS_LOG_LEVEL": (str, "INFO"),
}


def get_config_from_env(template: dict, overrides: Optional[dict] = None) -> dict:
    env = environ.Env(**template)
    overrides = overrides or {}

    config = {}
    for key in template.keys():
        if key in overrides:
            config[key] = overrides[key]
        else:
            config[key] = env(key)

    return config


def get_config(overrides: Optional[dict] = None) -> dict:
    """Read the relay mutation settings from the environment.

    Values passed in overrides take precedence over the environment.
    """
    config = get_config_from_env(CONFIG_TEMPLATE, overrides)

    policy = config["RELAY_MUTATIONS_RESERVED_NAME_POLICY"]
    if policy not in RESERVED_NAME_POLICIES:
        raise ImproperlyConfiguredMutation(
            f"RELAY_MUTATIONS_RESERVED_NAME_POLICY must be one of "
            f"{', '.join(RESERVED_NAME_POLICIES)}, got {policy!r}"
        )

    return config
