from .config import BaseSystem, conversion_table

__all__ = ['BaseSystem', 'conversion_table']
