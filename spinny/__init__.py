"""Spinny - weekly wheel bot for Discord."""
