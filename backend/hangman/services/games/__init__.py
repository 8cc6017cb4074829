"""Game domain services: the hangman engine, the orchestrator and its stores.

HTTP routes and socket handlers import from here, keeping transport concerns
separated from core game mechanics.
"""
