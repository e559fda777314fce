"""
Core utility functions for safe data access and basic operations.
"""


def safe_get_value(obj, key: str, default=0):
    """
    Safely get value from dict or record object. Returns default if None.

    This helper works with both plain dict payloads and Influencer records,
    handling None values consistently across the codebase.

    Args:
        obj: Dictionary or object with attributes
        key: Key/attribute name to retrieve
        default: Default value to return if key is missing or value is None

    Returns:
        The value associated with the key, or default if missing/None
    """
    if obj is None:
        return default
    if isinstance(obj, dict):
        value = obj.get(key, default)
    else:
        value = getattr(obj, key, default)

    # If value is None, return default instead
    return value if value is not None else default
