"""Domain Layer: entities, value objects, errors and ports.

Has no dependencies on the core or infrastructure layers.
"""
