"""
Core utilities shared across the usuario API.

This package hosts configuration, logging setup and the two security
collaborators (password hashing and access tokens). Services receive the
collaborators explicitly instead of importing them from here at call time.
"""
