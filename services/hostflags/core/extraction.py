"""
encryptedHostFlags extraction from embed page HTML.
"""

import re
from typing import Optional

# Matches "encryptedHostFlags":"<value>" as it appears in the page's ytcfg JSON.
ENCRYPTED_HOST_FLAGS_PATTERN = re.compile(r'"encryptedHostFlags"\s*:\s*"([^"]+)"')


def extract_encrypted_host_flags(html: str) -> Optional[str]:
    """
    Return the first encryptedHostFlags value in ``html``, or None when absent.

    Only the first occurrence is considered.
    """
    match = ENCRYPTED_HOST_FLAGS_PATTERN.search(html)
    if not match or not match.group(1):
        return None
    return match.group(1)
