"""
API Module
HTTP layer: versioned routers and their dependencies.
"""
