"""modern-frontend - CLI for the modern frontend build pipeline

Philosophy:
- Ruthless simplicity
- Commands parse flags and delegate; collaborators own the state
- Fail fast with one clear error line

Two commands are provided: ``frontend:config`` manages the compatibility
configuration of modules and themes, ``frontend:hmr`` toggles the Hot
Module Replacement development flag.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
