from .retail_cli import RetailCLI

__all__ = ['RetailCLI']
