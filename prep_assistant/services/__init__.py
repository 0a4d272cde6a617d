"""
Service layer package.
"""
