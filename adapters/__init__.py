"""
Adapters for Recipe Console: concrete storage and terminal implementations
of the domain interfaces.
"""
