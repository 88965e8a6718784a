import pluggy
from loguru import logger

# Global plugin namespace for intraline, also the setuptools entry point group
PLUGIN_NAMESPACE = "intraline"

hookspec = pluggy.HookspecMarker(PLUGIN_NAMESPACE)
hookimpl = pluggy.HookimplMarker(PLUGIN_NAMESPACE)


class IntralineSpec:
    """Hook specifications for extending intraline."""

    @hookspec
    def register_word_differ():
        """Return a tuple of (differ_name, differ_class) for word differ plugins.

        The differ_class should inherit from intraline.diff.base.WordDiffer and
        be constructible without arguments.

        Returns:
            tuple: (str: differ_name, class: differ_class)
        """
        pass


# Set up Plugin Manager
plugin_manager = pluggy.PluginManager(PLUGIN_NAMESPACE)

# Register hookspecs
plugin_manager.add_hookspecs(IntralineSpec)

_entrypoints_loaded = False


def load_entrypoint_plugins():
    """Discover installed plugins from external packages, once per process."""
    global _entrypoints_loaded
    if _entrypoints_loaded:
        return
    _entrypoints_loaded = True
    count = plugin_manager.load_setuptools_entrypoints(PLUGIN_NAMESPACE)
    if count:
        logger.info(f"Loaded {count} intraline plugin(s): {plugin_manager.get_plugins()}")


def collect_word_differs():
    """Gather (name, class) pairs from every plugin implementing register_word_differ."""
    from intraline.diff.base import WordDiffer

    differs = {}
    for result in plugin_manager.hook.register_word_differ():
        if not result:
            continue
        try:
            name, differ_class = result
        except (TypeError, ValueError):
            logger.warning(f"Ignoring malformed word differ registration: {result!r}")
            continue
        if not isinstance(name, str) or not (isinstance(differ_class, type) and issubclass(differ_class, WordDiffer)):
            logger.warning(f"Ignoring word differ plugin '{name}', it must register a WordDiffer subclass")
            continue
        differs[name.lower()] = differ_class
        logger.debug(f"Registered word differ plugin '{name}': {differ_class.__name__}")
    return differs
