"""
Checkout receipt calculation from a product catalog and discount cards.
"""

__version__ = '0.0.1'
