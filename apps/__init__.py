"""Domain applications of the resource booking service."""
