"""
Adapters layer - External capabilities (timezone database).
"""

from .offset_resolver import PendulumOffsetResolver, StaticOffsetResolver

__all__ = ["PendulumOffsetResolver", "StaticOffsetResolver"]
