"""
Domain layer - Core entities, value objects and repository contracts.

This layer contains the fundamental business objects and rules,
independent of any infrastructure or framework concerns.
"""
