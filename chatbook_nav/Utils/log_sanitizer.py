"""
Log sanitizer utilities to keep credentials out of navigation logs.

Account payloads carry API keys; anything account-shaped goes through
here before it reaches a loguru sink.
"""

import re
from typing import Any, Dict, List

REDACTED = "***REDACTED***"

# Patterns for credentials embedded in free text
SENSITIVE_PATTERNS = [
    (r'(api[_-]?key|apikey|auth[_-]?token|bearer)\s*[:=]\s*["\']?([^\s"\',}]+)', r'\1=' + REDACTED),
    (r'(Bearer\s+)([a-zA-Z0-9\-._~+/]+=*)', r'\1' + REDACTED),
    # URLs with embedded credentials
    (r'(https?://)([^:/\s]+):([^@/\s]+)@', r'\1***:***@'),
]

# Fields to redact in dictionaries (compared lower-cased)
SENSITIVE_FIELDS = {
    'api_key', 'apikey', 'api-key', 'password', 'secret', 'token',
    'auth_token', 'access_token', 'push_token', 'credentials',
}


def sanitize_string(text: str) -> str:
    """
    Sanitize a string by removing sensitive data patterns.

    Args:
        text: The string to sanitize

    Returns:
        Sanitized string with sensitive data redacted
    """
    if not isinstance(text, str):
        return str(text)

    result = text
    for pattern, replacement in SENSITIVE_PATTERNS:
        result = re.sub(pattern, replacement, result, flags=re.IGNORECASE)
    return result


def sanitize_dict(data: Dict[str, Any], deep: bool = True) -> Dict[str, Any]:
    """
    Return a copy of ``data`` with sensitive fields redacted.

    Absent (None) values are left as None so logs still show whether a
    credential was present at all.
    """
    if not isinstance(data, dict):
        return data

    result = {}
    for key, value in data.items():
        if isinstance(key, str) and key.lower() in SENSITIVE_FIELDS:
            result[key] = REDACTED if value else value
        elif deep and isinstance(value, dict):
            result[key] = sanitize_dict(value, deep=True)
        elif deep and isinstance(value, list):
            result[key] = sanitize_list(value, deep=True)
        elif isinstance(value, str):
            result[key] = sanitize_string(value)
        else:
            result[key] = value
    return result


def sanitize_list(data: List[Any], deep: bool = True) -> List[Any]:
    """Sanitize each element of a list."""
    if not isinstance(data, list):
        return data

    result = []
    for item in data:
        if isinstance(item, dict) and deep:
            result.append(sanitize_dict(item, deep=True))
        elif isinstance(item, list) and deep:
            result.append(sanitize_list(item, deep=True))
        elif isinstance(item, str):
            result.append(sanitize_string(item))
        else:
            result.append(item)
    return result
