from ._traced import traced

__all__ = ["traced"]
