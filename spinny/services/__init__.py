"""Spinny - Services Package."""
