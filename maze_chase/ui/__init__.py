"""
pygame frontend: render sink and keyboard input.
"""
