"""
Resolution pipeline (Resolver) and the input-driven session wrapper used by front ends.
"""

from mangologs.resolver.resolver import Resolution, ResolutionStatus, Resolver
from mangologs.resolver.session import ResolutionSession, SessionState, SessionStatus

__all__ = [
    "Resolution",
    "ResolutionSession",
    "ResolutionStatus",
    "Resolver",
    "SessionState",
    "SessionStatus",
]
