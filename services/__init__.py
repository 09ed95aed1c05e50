"""
Call sites that perform work through the capability registry.
"""

from .area_service import AreaService
from .audit_service import AuditService
from .document_service import DocumentService
from .auth_service import AuthenticationService
from .shopping_cart import CartItem, ShoppingCart, CheckoutService

__all__ = [
    'AreaService',
    'AuditService',
    'DocumentService',
    'AuthenticationService',
    'CartItem',
    'ShoppingCart',
    'CheckoutService'
]
