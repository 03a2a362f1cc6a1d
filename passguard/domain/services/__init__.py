"""
Password Domain Services

Policy-aware password generation.
"""

from .password_generator import generate, generate_valid

__all__ = [
    "generate",
    "generate_valid",
]
