"""
Game layer - runs, scoring and level management on top of the maze engine
"""
