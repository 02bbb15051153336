"""Spinny - Commands."""
