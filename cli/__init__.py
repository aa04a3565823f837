"""
Command Line Interface Module
"""
from .main import KitchenCLI, main

__all__ = ['KitchenCLI', 'main']
