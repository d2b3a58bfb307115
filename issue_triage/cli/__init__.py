"""Command line interface for issue triage."""
