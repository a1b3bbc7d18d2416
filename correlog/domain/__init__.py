"""Domain layer for correlog.

Pure types and the correlation state holder. Imports nothing from the
application, infrastructure, config or bootstrap layers.
"""
