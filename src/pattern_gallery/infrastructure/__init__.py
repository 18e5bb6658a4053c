"""Technical infrastructure: logging and instance lifetime management."""
