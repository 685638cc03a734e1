"""Command-line interface for cargo-ensure-prefix."""
