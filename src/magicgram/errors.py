class ConfigurationError(ValueError):
    """Raised when a generator or layout is constructed with invalid settings."""
