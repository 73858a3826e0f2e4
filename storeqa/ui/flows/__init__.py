from .cart_flows import CartFlows

__all__ = ["CartFlows"]
