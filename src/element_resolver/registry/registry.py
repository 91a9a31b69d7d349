"""
Session Registry - Central registry for driver adapters.

Driver adapters are registered by engine name so that configuration can pick
one without importing every driver library up front.

Example:
    >>> from element_resolver.registry import register_session, get_session
    >>> 
    >>> @register_session("mydriver")
    >>> class MyDriverSession(ISession):
    ...     pass
    >>> 
    >>> session_class = get_session("mydriver")
"""

from typing import Callable, Dict, List, Type

from element_resolver.interfaces.session import ISession


class SessionRegistry:
    """
    Central registry for ISession implementations.
    
    Adapters are registered either directly (a class) or through a factory
    that imports and returns the class on first use.
    """
    
    _sessions: Dict[str, Type[ISession]] = {}
    _session_factories: Dict[str, Callable[[], Type[ISession]]] = {}
    
    @classmethod
    def register_session(cls, name: str) -> Callable[[Type[ISession]], Type[ISession]]:
        """
        Decorator to register a session adapter.
        
        Args:
            name: Unique engine name (e.g., 'selenium', 'playwright')
            
        Returns:
            Decorator function
            
        Example:
            >>> @SessionRegistry.register_session("selenium")
            >>> class SeleniumSession(ISession):
            ...     pass
        """
        def decorator(session_class: Type[ISession]) -> Type[ISession]:
            if name in cls._sessions:
                raise ValueError(f"Session '{name}' is already registered")
            cls._sessions[name] = session_class
            return session_class
        return decorator
    
    @classmethod
    def register_session_factory(
        cls,
        name: str,
        factory: Callable[[], Type[ISession]],
    ) -> None:
        """
        Register a factory function for lazy-loading a session adapter.
        
        Keeps driver libraries out of the import path until an engine is used.
        """
        cls._session_factories[name] = factory
    
    @classmethod
    def get_session(cls, name: str) -> Type[ISession]:
        """
        Get a registered session class by name.
        
        Args:
            name: The registered engine name
            
        Returns:
            The session class
            
        Raises:
            ValueError: If the engine is not registered
        """
        if name in cls._sessions:
            return cls._sessions[name]
        
        if name in cls._session_factories:
            session_class = cls._session_factories[name]()
            cls._sessions[name] = session_class
            return session_class
        
        available = sorted(set(cls._sessions) | set(cls._session_factories))
        raise ValueError(
            f"Unknown session engine: '{name}'. Available engines: {available}"
        )
    
    @classmethod
    def list_sessions(cls) -> List[str]:
        """List all registered engine names."""
        return sorted(set(cls._sessions.keys()) | set(cls._session_factories.keys()))
    
    @classmethod
    def clear_all(cls) -> None:
        """Clear all registrations (useful for testing)."""
        cls._sessions.clear()
        cls._session_factories.clear()


def register_session(name: str) -> Callable[[Type[ISession]], Type[ISession]]:
    """Register a session adapter. Shortcut for SessionRegistry.register_session."""
    return SessionRegistry.register_session(name)


def get_session(name: str) -> Type[ISession]:
    """Get a session adapter class. Shortcut for SessionRegistry.get_session."""
    return SessionRegistry.get_session(name)
