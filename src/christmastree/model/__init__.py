"""
The MODEL layer contains pure data structures and scene logic.
It has NO knowledge of the GUI (Qt).
It deals with geometry, random scene generation and the animation rule.
"""
