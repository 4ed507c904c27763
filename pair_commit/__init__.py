"""
pair-commit: keep a list of co-authors and print Git Co-authored-by
trailers for the ones you are currently pairing with.
"""

__version__ = "0.1.0"
