"""
                        Services Module

Business logic above the repositories.

Services:
    - payment: payment gateway strategy (Mock for development, Stripe otherwise)
    - checkout: payment intent creation and payment recording + cart purge
    - stats: admin dashboard aggregation
"""
