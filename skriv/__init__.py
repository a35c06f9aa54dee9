"""skriv - feedback and localization core for the Skriv writing workshop."""

__version__ = "0.3.0"
