"""
                Restaurant Ordering API

Backend for a restaurant ordering app: menu browsing, carts, user roles,
reviews and Stripe checkout, with a hybrid Mock/Real payment gateway.

Author: Khalil_Bannouri
Version: 4.0.0
License: MIT
"""

__version__ = "4.0.0"
__author__ = "Khalil_Bannouri"
