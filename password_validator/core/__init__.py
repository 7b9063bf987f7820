"""Core package: result types, error codes, settings and composition root."""
