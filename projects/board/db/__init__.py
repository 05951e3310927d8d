"""Modelos de banco do Board AI."""
