"""
Service layer for request resolution and content delivery.
"""
