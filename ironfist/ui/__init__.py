"""
User interface module for the battle engine.

Renders finished battles to the console with rich markup.
"""
