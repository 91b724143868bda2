"""
cornertile - crop marker-framed screenshots and tile them into one collage.
"""

__version__ = "1.0.0"
