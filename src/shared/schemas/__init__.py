"""Shared request and response schemas.

Available schemas:
- password.py: Password validation requests and outcomes
"""
