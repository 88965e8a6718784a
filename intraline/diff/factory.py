"""
Factory for creating word differ instances.

Provides a unified interface for instantiating word differs based on a strategy
name, covering the built-in strategies and any registered through plugins.
"""

from loguru import logger

from intraline.config import load_settings
from intraline.pluggy_interface import collect_word_differs, load_entrypoint_plugins

from .base import UnknownDifferError, WordDiffer
from .char_differ import CharDiffer
from .token_differ import TokenDiffer

# Built-in strategies, plugins cannot shadow these
DIFFERS = {
    'token': TokenDiffer,
    'char': CharDiffer,
}


def _registered_differs(load_plugins: bool = True) -> dict:
    differs = {}
    if load_plugins:
        load_entrypoint_plugins()
        differs.update(collect_word_differs())
    differs.update(DIFFERS)
    return differs


def get_available_differs() -> list:
    """
    Get the names of every strategy create_word_differ() accepts.

    Returns:
        Sorted list of strategy names
    """
    return sorted(_registered_differs(load_settings().load_plugins))


def create_word_differ(name: str = None, **kwargs) -> WordDiffer:
    """
    Create a word differ instance for the named strategy.

    Args:
        name: Strategy name ('token', 'char' or a plugin name), default from settings
        **kwargs: Passed to the strategy's constructor

    Returns:
        Configured WordDiffer instance

    Raises:
        UnknownDifferError: If no strategy is registered under that name
    """
    settings = load_settings()
    name = (name or settings.default_differ).lower()

    differs = _registered_differs(settings.load_plugins)
    if name not in differs:
        available = ', '.join(sorted(differs))
        raise UnknownDifferError(f"Unknown word differ: {name}. Available: {available}")

    logger.debug(f"Creating word differ: {name}")
    return differs[name](**kwargs)
