"""Output layer — turns ServiceResult into text for the CLI."""
