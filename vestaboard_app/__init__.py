"""
Vestaboard App - layout engine for a 6x22 split-flap style board

Turns short poems, weather forecasts, market quotes and task lists into
complete grids of board symbols and sends them to the board.
"""

__version__ = "0.1.0"
__author__ = "Vestaboard App Team"
