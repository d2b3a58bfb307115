"""Issue triage automation: priority inference, labels and project board sync."""

__version__ = "0.1.0"
