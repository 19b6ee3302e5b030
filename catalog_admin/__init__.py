"""Catalog admin backend.

Assembles the view-models of the catalog administration screens from
catalog, discount, localization, store and ACL services.
"""

__version__ = "0.1.0"
