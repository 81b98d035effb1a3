"""Service layer for Todos CLI."""
