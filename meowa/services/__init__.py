"""Application services layer.

Services own application state and coordinate the domain with
infrastructure. They should avoid UI concerns.
"""
