"""Configuration utility functions."""

from copy import deepcopy
from pathlib import Path
from typing import Any
from typing import TypeVar
from urllib.parse import urlparse


T = TypeVar('T', bound=dict[str, Any])

def deep_merge(base: T, override: T) -> T:
    """Deep merge two dictionaries.
    
    Args:
        base: Base dictionary
        override: Dictionary to override base values
        
    Returns:
        Merged dictionary
    """
    result = deepcopy(base)
    
    for key, value in override.items():
        if (
            key in result and
            isinstance(result[key], dict) and
            isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)
    
    return result

def resolve_path(
    path: str | Path,
    base_dir: str | Path | None = None,
    create: bool = False
) -> Path:
    """Resolve path relative to base directory.
    
    Args:
        path: Path to resolve
        base_dir: Base directory for relative paths
        create: Whether to create the directory
        
    Returns:
        Resolved Path object
    """
    if isinstance(path, str):
        path = Path(path)
    path = path.expanduser()
    
    if not path.is_absolute() and base_dir is not None:
        if isinstance(base_dir, str):
            base_dir = Path(base_dir)
        path = base_dir / path
    
    if create:
        path.mkdir(parents=True, exist_ok=True)
    
    return path

def validate_api_url(url: str) -> None:
    """Validate API base URL format.
    
    Args:
        url: URL to validate
        
    Raises:
        ValueError: If URL is invalid
    """
    if not url or not url.strip():
        raise ValueError("Invalid API URL: empty URL")
    parsed = urlparse(url)
    if parsed.scheme not in ('http', 'https'):
        raise ValueError(f"Invalid API URL: unsupported scheme '{parsed.scheme}'")
    if not parsed.netloc:
        raise ValueError("Invalid API URL: missing host")

def parse_timeout(value: Any) -> float:
    """Parse a timeout value in seconds.
    
    Raises:
        ValueError: If timeout is not a positive number
    """
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timeout: {value!r}")
    if timeout <= 0:
        raise ValueError(f"Invalid timeout: {value!r} must be positive")
    return timeout
