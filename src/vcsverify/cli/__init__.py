"""Command-line interface for vcsverify."""
