"""Domain layer for nutrition goal estimation.

Pure business logic (body metrics, energy estimates, macro targets),
independent of storage, scheduling and any user interface.
"""
