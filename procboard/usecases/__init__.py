"""Use-case layer for the editor transitions.

Modules here combine domain mutations into message handlers without touching
the presentation layer or performing I/O, preserving MVVM + Hexagonal
boundaries.
"""
