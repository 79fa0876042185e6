"""Request validation for the transport layer."""
