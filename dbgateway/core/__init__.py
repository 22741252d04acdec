"""Core building blocks: logging and error taxonomy."""
