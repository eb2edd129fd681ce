"""
API v1 Module
Version 1 of the Smart Pantry REST API.
"""
