"""Entry points that translate host input into patch calls."""
