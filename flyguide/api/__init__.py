"""
API package - HTTP surface
"""
