"""
Core package for pagecheck.
Lightweight package init to avoid import cycles (utils.timing imports errors).

Consumers should import submodules directly, e.g.:
  from pagecheck.core.element import Element
  from pagecheck.core.errors import NotAttached
"""

__all__: list[str] = []
