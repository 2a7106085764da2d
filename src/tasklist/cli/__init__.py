"""Command-line entry point, prompts and action dispatch."""
