"""Core utilities: exceptions, logging and middleware."""
