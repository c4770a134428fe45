class InvalidArgumentError(ValueError):
    """Raised when a generation call gets a count, prestige, star rating or weight table it cannot use."""
