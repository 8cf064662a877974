"""Framework-agnostic maze generation and path search."""
