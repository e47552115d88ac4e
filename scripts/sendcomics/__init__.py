"""
SendComics - daily comic strip digests delivered by email.
"""

__version__ = "1.0.0"
