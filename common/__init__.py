"""
Shared helpers: block descriptor type and JSON logging setup.
"""
