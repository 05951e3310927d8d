"""
Board AI: conselho multi-agente que avalia ideias de negócio via Telegram.
"""
