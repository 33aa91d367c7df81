"""
Word Validator — Is this a real word?

Architecture: Normalize → Local word list → External provider chain → Tagged result
Philosophy:  Answer from what we hold first. Ask the network only on a miss.
"""

__version__ = "0.1.0"
