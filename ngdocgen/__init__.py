"""AI-assisted Markdown documentation for Angular projects."""

__version__ = "1.0.0"
