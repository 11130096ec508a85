"""
AEM Block Collection Test Suite

Structure:
- unit/: Unit tests for the catalog source, query handlers, MCP/HTTP surfaces
"""
