"""Application layer for correlog.

Ports (interfaces the core consumes) and the services built on them:
activity scopes and the Logger emission surface.
"""
