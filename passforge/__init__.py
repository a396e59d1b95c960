"""
Passforge - secure random password generation.

Builds passwords from digits, symbols, uppercase and lowercase letters,
with at least one character from every enabled class.
"""

from .utils.password_generator import GenerationRequest, PasswordGenerator, generate_password

__version__ = "1.0.0"

__all__ = ['GenerationRequest', 'PasswordGenerator', 'generate_password', '__version__']
