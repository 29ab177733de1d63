"""
Hero Sprites - pygame sprite animation demo
"""

__version__ = "0.1.0"
