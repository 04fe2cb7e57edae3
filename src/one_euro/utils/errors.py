class InvalidParameter(ValueError):
    """Raised when a filter parameter is set outside its allowed range."""
