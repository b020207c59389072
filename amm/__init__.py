"""amm - generate a JWM menu from FreeDesktop .desktop files."""

__app_name__ = "amm"
__version__ = "1.0.0"
