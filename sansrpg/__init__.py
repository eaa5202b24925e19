"""A full-screen role-playing game with mob farming, shops, a quest and a boss, and its game rules."""

__version__ = "0.1.0"