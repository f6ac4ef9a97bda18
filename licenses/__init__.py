"""
Licenses module - local license store.

This module handles:
- License entity (serial number bound to customer, product and order)
- Serial number and token input validation
- License lookup by serial number
"""
