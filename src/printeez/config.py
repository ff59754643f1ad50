"""Runtime settings read from the environment."""

import os

# Email
EMAIL_BACKEND = os.getenv("EMAIL_BACKEND", "fake").lower()
EMAIL_HOST = os.getenv("EMAIL_HOST", "smtp.gmail.com")
EMAIL_PORT = int(os.getenv("EMAIL_PORT", "587"))
EMAIL_USER = os.getenv("EMAIL_USER")
EMAIL_PASS = os.getenv("EMAIL_PASS")
EMAIL_FROM = os.getenv("EMAIL_FROM", "Printeez <noreply@printeez.com>")

# Pagination
USER_ORDERS_PAGE_SIZE = 10
USER_ORDERS_MAX_PAGE_SIZE = 50
ADMIN_ORDERS_PAGE_SIZE = 20
ADMIN_ORDERS_MAX_PAGE_SIZE = 100
PRODUCTS_PAGE_SIZE = 20
PRODUCTS_MAX_PAGE_SIZE = 100
TOP_SELLING_DEFAULT = 10
TOP_SELLING_MAX = 50
