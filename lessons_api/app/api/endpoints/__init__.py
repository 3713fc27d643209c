"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain (lessons, orders, search, images).
"""
