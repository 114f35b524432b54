"""Code Source Tracker: declare where code came from and keep running stats."""

__version__ = "1.0.0"
