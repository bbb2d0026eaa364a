from storefront.models.category import Category
from storefront.models.product import Product, BadgeColor
from storefront.models.menu_item import MenuItem
from storefront.models.faq import FAQ
from storefront.models.image_message import ImageMessage
from storefront.models.misc_content import MiscContent
