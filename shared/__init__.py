"""
Shared Kernel

Base classes and utilities shared by the domain apps: value objects,
domain errors, tagged results and the unit of work.
"""
