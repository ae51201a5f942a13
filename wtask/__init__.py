"""
wtask - run short shell commands by alias from a tiny config file.
"""

__version__ = "0.1.0"
