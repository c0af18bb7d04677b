"""Infrastructure layer — bootstrap file loading and the guarded state store."""
