"""
Default namespace for MainApp primitives

Contains the integer arithmetic primitives available as unqualified names.
"""
