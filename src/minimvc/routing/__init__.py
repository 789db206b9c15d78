"""Routing — ordered route table with anchored ``{placeholder}`` matching.

Routes are registered during setup and frozen into an immutable tuple
when the app starts serving.
"""
