"""
Data access and external integrations
"""
