"""
Chain family implementations.

Each sub-package implements the SDK contracts for one Driver.
"""
