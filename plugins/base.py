"""
Base interface for grammar plugins.

A grammar plugin wraps an external grammar-driven parser and hands its
concrete syntax tree, name tables and token stream to the tree simplifier.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from simpletree.models import LeafClassification, ParsedSource


class ParseError(Exception):
    """Raised when a plugin cannot parse source text."""
    pass


class GrammarPlugin(ABC):
    """
    Base interface for language grammar plugins.

    PluginManager.initialize_plugins builds plugins as
    ``plugin_class(config=config)`` with the plugin's parsed config.yaml,
    so subclasses accept a ``config`` keyword argument.
    """
    
    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the language name (e.g., 'javascript')."""
        pass
    
    @property
    @abstractmethod
    def file_extensions(self) -> List[str]:
        """Return supported file extensions (e.g., ['.js', '.mjs'])."""
        pass
    
    @abstractmethod
    def parse_source(self, content: str, file_path: Optional[str] = None) -> ParsedSource:
        """
        Parse source text into a concrete syntax tree.
        
        Args:
            content: Source text
            file_path: Path the source came from, used for logging only
            
        Returns:
            ParsedSource with the CST, rule/token name tables and token stream
            
        Raises:
            ParseError: If the source cannot be parsed
        """
        pass
    
    @abstractmethod
    def leaf_classification(self) -> LeafClassification:
        """
        Return the atomic rule and token names in this grammar's vocabulary.
        
        Returns:
            LeafClassification used when simplifying this plugin's trees
        """
        pass
