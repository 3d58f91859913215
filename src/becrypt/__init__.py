"""
becrypt - CLI tool for generating and checking bcrypt hashes.
"""

__version__ = "1.3.0"
