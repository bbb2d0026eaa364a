"""
Server-rendered storefront and admin console pages
"""
