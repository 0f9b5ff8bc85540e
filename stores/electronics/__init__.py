"""Electronics store vertical.

Reference catalog (iPad, MacBook Pro, Apple TV, VGA adapter) with the
opening promotions:
- 3 for 2 on Apple TVs
- Free VGA adapter with every MacBook Pro
- iPads drop to $499.99 each once 4 or more are bought
"""
