"""Observabilidade do Board AI."""
