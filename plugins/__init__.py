"""
Grammar plugin architecture.

This package provides the plugin system wrapping external grammar-driven
parsers, including the base plugin interface and plugin manager.
"""

from plugins.base import GrammarPlugin, ParseError
from plugins.manager import PluginManager

__all__ = ['GrammarPlugin', 'ParseError', 'PluginManager']
