"""Bobozan: an energy-resource combat minigame (波波攒).

Each round both sides commit to an action at the same time; the rule engine
resolves the pair and a weighted-random policy chooses the opponent's move.
"""

__version__ = "0.1.0"
