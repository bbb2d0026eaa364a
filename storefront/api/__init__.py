"""
HTTP routers for the JSON API and rendered pages
"""
