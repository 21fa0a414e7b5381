"""
Core app: user accounts, authentication, and shared API plumbing.
"""
