"""Feature flags read from the ``TRACESTYLER_FEATURES`` environment variable.

The variable holds comma-separated tokens: ``name`` or ``name=on`` switches a
flag on, ``!name``, ``-name`` or ``name=off`` switches it off. Dashes and
underscores are interchangeable in names.
"""

from __future__ import annotations

import os
from functools import lru_cache

ENV_VAR = "TRACESTYLER_FEATURES"

_SWITCH_VALUES = {
    "1": True,
    "true": True,
    "on": True,
    "yes": True,
    "enable": True,
    "enabled": True,
    "0": False,
    "false": False,
    "off": False,
    "no": False,
    "disable": False,
    "disabled": False,
}

# Values used when a flag is absent from the environment.
_DEFAULTS: dict[str, bool] = {
    "strict_callbacks": False,
}


def _flag_key(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def _parse_tokens(raw: str) -> dict[str, bool]:
    features: dict[str, bool] = {}
    for token in (t.strip() for t in raw.split(",")):
        if not token:
            continue
        if token[0] in "!-":
            features[_flag_key(token[1:])] = False
        elif "=" in token:
            name, value = token.split("=", 1)
            switch = _SWITCH_VALUES.get(value.strip().lower())
            if switch is not None:
                features[_flag_key(name)] = switch
        else:
            features[_flag_key(token)] = True
    return features


@lru_cache(maxsize=1)
def _cached_flags() -> dict[str, bool]:
    return _parse_tokens(os.environ.get(ENV_VAR, ""))


def reload() -> None:
    """Forget the parsed environment so the next lookup reads it again."""

    _cached_flags.cache_clear()


def is_enabled(name: str, default: bool | None = None) -> bool:
    key = _flag_key(name)
    flags = _cached_flags()
    if key in flags:
        return flags[key]
    if default is not None:
        return default
    return _DEFAULTS.get(key, False)


def strict_callbacks() -> bool:
    """Reject callback bundles that carry keys outside the expected shape."""

    return is_enabled("strict_callbacks")
