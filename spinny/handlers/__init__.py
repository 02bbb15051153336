"""Spinny - Event Handlers."""
