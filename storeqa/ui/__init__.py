from .actions import ActionFactory
from .flows import CartFlows

__all__ = ["ActionFactory", "CartFlows"]
