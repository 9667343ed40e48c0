"""
Multi-step ezgif workflows
"""

from .convert import run_conversion
from .overlay import run_overlay
from .render import run_render

__all__ = ['run_conversion', 'run_overlay', 'run_render']
