"""Configuration commands for the bug tracker CLI."""

from cyclopts import App

from bugtracker.config import get_config

config_app = App(name="config", help="Manage configuration")

KNOWN_KEYS = ("api.url", "api.token", "api.timeout", "date_format")


def _mask(key: str, value: object) -> object:
    if key == "api.token" and value:
        return "****"
    return value


@config_app.command
def set(key: str, value: str, global_: bool = False) -> None:
    """Set a configuration setting.

    Args:
        key: Configuration key (api.url, api.token, api.timeout, date_format)
        value: Configuration value
        global_: If True, set in global config. If False, set in local config.
    """
    if key not in KNOWN_KEYS:
        print(f"Warning: {key} is not a known setting ({', '.join(KNOWN_KEYS)})")
    config = get_config(use_global=global_)
    config.set(key, value)
    scope = "global" if global_ else "local"
    print(f"Set {key} = {_mask(key, value)} ({scope})")


@config_app.command
def unset(key: str, global_: bool = False) -> None:
    """Unset a configuration setting."""
    config = get_config(use_global=global_)
    config.unset(key)
    scope = "global" if global_ else "local"
    print(f"Unset {key} ({scope})")


@config_app.command
def get(key: str, global_: bool = False) -> None:
    """Get the value of a configuration setting.

    Args:
        key: Configuration key
        global_: If True, get from global config only. If False, get with global fallback.
    """
    value = get_config(use_global=global_).get(key)
    if value is None:
        print(f"{key} is not set")
    else:
        print(f"{key} = {_mask(key, value)}")


@config_app.command(name="list")
def list_config(global_: bool = False) -> None:
    """List all configuration settings."""
    settings = get_config(use_global=global_).list()
    scope = "global" if global_ else "local"

    if not settings:
        print(f"No {scope} configuration settings")
        return

    print(f"Settings ({scope}):\n")
    for key, value in settings.items():
        print(f"{key} = {_mask(key, value)}")
