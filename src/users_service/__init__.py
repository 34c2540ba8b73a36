"""Users service - HTTP and CLI entry points over users_identity."""
