"""
Plugin Manager for grammar plugins.

Plugins live in subdirectories of a plugins directory, each described by a
config.yaml whose ``plugin_class`` entry ("module:Class") names the
GrammarPlugin to instantiate. The manager builds every plugin from its
config and picks one per source file by extension.
"""

import importlib
import logging
from pathlib import Path
from typing import Dict, List, Optional
import yaml

from plugins.base import GrammarPlugin
from simpletree.config import settings

logger = logging.getLogger(__name__)

REQUIRED_CONFIG_FIELDS = ('name', 'version', 'file_extensions', 'plugin_class')


def _import_plugin_class(spec: str) -> type:
    """Resolve a "package.module:ClassName" reference."""
    module_name, _, class_name = spec.partition(':')
    if not module_name or not class_name:
        raise ValueError(f"plugin_class must look like 'module:Class', got {spec!r}")

    plugin_class = getattr(importlib.import_module(module_name), class_name)
    if not (isinstance(plugin_class, type) and issubclass(plugin_class, GrammarPlugin)):
        raise TypeError(f"{spec} is not a GrammarPlugin")
    return plugin_class


class PluginManager:
    """Builds grammar plugins from their configs and selects them by file."""

    def __init__(self):
        self._plugins: Dict[str, GrammarPlugin] = {}
        self._extension_map: Dict[str, str] = {}
        self._config_cache: Dict[str, Dict] = {}

    def register_plugin(self, plugin: GrammarPlugin) -> None:
        """
        Register a grammar plugin under its language name and extensions.

        A later registration for the same language or extension replaces the
        earlier one.
        """
        language_name = plugin.language_name

        if language_name in self._plugins:
            logger.warning(f"Plugin for language '{language_name}' already registered, replacing it")
        self._plugins[language_name] = plugin

        for ext in plugin.file_extensions:
            previous = self._extension_map.get(ext)
            if previous is not None and previous != language_name:
                logger.warning(f"Extension '{ext}' moves from '{previous}' to '{language_name}'")
            self._extension_map[ext] = language_name

        logger.info(f"Registered '{language_name}' plugin for {plugin.file_extensions}")

    def get_plugin_for_file(self, file_path: str) -> Optional[GrammarPlugin]:
        """
        Get the plugin registered for a file's extension.

        Args:
            file_path: Path to the source file

        Returns:
            GrammarPlugin instance if found, None otherwise
        """
        ext = Path(file_path).suffix
        language = self._extension_map.get(ext)
        if language is None:
            logger.debug(f"No grammar plugin for extension '{ext}' ({file_path})")
            return None
        return self._plugins[language]

    def list_supported_languages(self) -> List[str]:
        """List all registered language plugins."""
        return list(self._plugins)

    def list_supported_extensions(self) -> List[str]:
        """List all supported file extensions."""
        return list(self._extension_map)

    def load_plugin_config(self, plugin_dir: Path) -> Dict:
        """
        Load a plugin's config.yaml. Results are cached per path.

        Args:
            plugin_dir: Directory containing config.yaml

        Returns:
            The configuration mapping

        Raises:
            FileNotFoundError: If config.yaml is not found
            ValueError: If a required field is missing
            yaml.YAMLError: If config.yaml is malformed
        """
        config_path = plugin_dir / "config.yaml"
        cache_key = str(config_path)
        if cache_key in self._config_cache:
            return self._config_cache[cache_key]

        if not config_path.exists():
            raise FileNotFoundError(f"Plugin configuration not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse plugin configuration {config_path}: {e}")
            raise

        missing = [field for field in REQUIRED_CONFIG_FIELDS if field not in config]
        if missing:
            raise ValueError(f"Missing required fields {missing} in {config_path}")

        self._config_cache[cache_key] = config
        logger.debug(f"Loaded plugin configuration from {config_path}")
        return config

    def initialize_plugins(self, plugins_dir: Optional[Path] = None) -> List[str]:
        """
        Build and register every plugin found in a plugins directory.

        Each subdirectory holding a config.yaml is loaded, its plugin_class
        is imported and instantiated with the config, and the instance is
        registered. A plugin that fails at any of these steps is logged and
        skipped.

        Args:
            plugins_dir: Directory to scan. Defaults to the configured
                plugins_dir, then to this package's directory.

        Returns:
            Language names of the plugins registered by this call
        """
        if plugins_dir is None:
            plugins_dir = settings.plugins_dir or Path(__file__).parent

        registered: List[str] = []
        if not plugins_dir.is_dir():
            logger.warning(f"Plugins directory not found: {plugins_dir}")
            return registered

        logger.info(f"Initializing plugins from {plugins_dir}")

        for plugin_dir in sorted(plugins_dir.iterdir()):
            if not (plugin_dir / "config.yaml").is_file():
                continue

            try:
                config = self.load_plugin_config(plugin_dir)
                plugin = _import_plugin_class(config['plugin_class'])(config=config)
            except Exception as e:
                logger.error(f"Skipping plugin in {plugin_dir}: {e}")
                continue

            self.register_plugin(plugin)
            registered.append(plugin.language_name)
            logger.info(f"Initialized plugin {config['name']} v{config['version']}")

        return registered
