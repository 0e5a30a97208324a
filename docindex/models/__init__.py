"""Request, response and result models."""
