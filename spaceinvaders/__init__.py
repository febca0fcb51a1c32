"""A Space Invaders arcade game: display-free game rules and a pygame window."""

__version__ = "1.0.0"