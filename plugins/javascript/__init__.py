"""
JavaScript grammar plugin.

This plugin parses JavaScript with tree-sitter and exposes the result as a
concrete syntax tree with a hidden-channel token stream.
"""

from plugins.javascript.plugin import JavaScriptPlugin

__all__ = ['JavaScriptPlugin']
