"""
Vasse Bakery storefront and content management backend
"""
