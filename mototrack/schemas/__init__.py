"""Request, response and filter schemas."""
