"""
Service layer - category use cases orchestrating the domain and repositories.
"""
