"""Command implementations for the depimpact CLI."""
