"""
Game entities
"""
