"""
Core configuration, persistence, auth and error handling
"""
