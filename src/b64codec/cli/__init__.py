"""Command line interface for b64codec."""
