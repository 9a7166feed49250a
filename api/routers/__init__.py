"""
Routers - endpointy API.
"""
