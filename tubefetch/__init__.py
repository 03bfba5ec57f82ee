"""
TubeFetch: servicios HTTP mínimos para descargar videos de YouTube a disco.
"""
__version__ = "1.0.0"
