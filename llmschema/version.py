"""Version information for llmschema."""

__version__ = "0.3.0"
