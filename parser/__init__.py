from .catalog import LocaleCatalog

__all__ = ["LocaleCatalog"]
