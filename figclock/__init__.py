"""
figclock - a full-screen ASCII-art message and elapsed-time clock
"""

__version__ = "0.3.0"
