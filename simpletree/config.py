"""
Application configuration management.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings

from simpletree.models.simple_tree import LeafClassification


DEFAULT_LEAF_RULE_NAMES = [
    "identifier",
    "literal",
    "arrayLiteral",
    "objectLiteral",
    "templateStringLiteral",
    "numericLiteral",
    "bigintLiteral",
]

DEFAULT_LEAF_SYMBOLIC_NAMES = [
    "RegularExpressionLiteral",
    "NullLiteral",
    "BooleanLiteral",
    "DecimalLiteral",
    "HexIntegerLiteral",
    "OctalIntegerLiteral",
    "OctalIntegerLiteral2",
    "BinaryIntegerLiteral",
    "BigHexIntegerLiteral",
    "BigOctalIntegerLiteral",
    "BigBinaryIntegerLiteral",
    "BigDecimalIntegerLiteral",
    "Identifier",
    "StringLiteral",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Leaf classification (grammar vocabulary of the default JavaScript grammar)
    leaf_rule_names: List[str] = list(DEFAULT_LEAF_RULE_NAMES)
    leaf_symbolic_names: List[str] = list(DEFAULT_LEAF_SYMBOLIC_NAMES)
    identifier_symbolic_name: str = "Identifier"
    
    # Token stream
    eof_text: str = "<EOF>"
    hidden_channel: int = 1
    
    # Plugins
    plugins_dir: Optional[Path] = None
    
    class Config:
        env_prefix = "SIMPLETREE_"
        env_file = ".env"
        case_sensitive = False
    
    def leaf_classification(self) -> LeafClassification:
        """Build the leaf classification described by these settings."""
        return LeafClassification(
            rule_names=frozenset(self.leaf_rule_names),
            symbolic_names=frozenset(self.leaf_symbolic_names),
            identifier_symbolic_name=self.identifier_symbolic_name,
        )


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
