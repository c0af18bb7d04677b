"""Domain layer — pure types and rules with no I/O.

Nothing here may import from infrastructure, services, commands, or output.
"""
