"""Command-line shell for the piggy ledger."""
