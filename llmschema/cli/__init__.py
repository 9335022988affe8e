"""Command-line interface for llmschema."""
