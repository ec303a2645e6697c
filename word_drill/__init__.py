"""
Word Drill - Vocabulary Drilling Tool

Load a word list, reveal one word at a time and mark it as known or
missed. Missed words come back a few positions later until they stick.
"""

__version__ = "1.0.0"
__author__ = "Word Drill Contributors"
