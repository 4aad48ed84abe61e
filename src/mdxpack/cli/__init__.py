"""Command line interface for mdxpack."""
