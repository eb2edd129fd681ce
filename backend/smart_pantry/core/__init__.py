"""
Core Module
Settings, constants, password hashing and expiry helpers.
"""
