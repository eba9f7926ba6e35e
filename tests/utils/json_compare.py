from typing import Any, Dict


def without_keys(data: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    """Copy of a JSON object minus volatile keys (messages, generated values)."""
    return {k: v for k, v in data.items() if k not in keys}
