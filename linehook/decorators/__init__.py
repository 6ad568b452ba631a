"""Request decorators."""
