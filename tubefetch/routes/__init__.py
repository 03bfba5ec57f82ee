"""
Routers de la API.
"""
