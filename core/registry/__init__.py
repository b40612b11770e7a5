from .service_registry import Binding, ServiceRegistry

__all__ = ['Binding', 'ServiceRegistry']
