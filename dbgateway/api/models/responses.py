"""Response envelope for the table gateway.

Success: {"success": true, "data": <result or null>}
Failure: {"success": false, "error": <message>} (see api.middleware.error_handler)
"""

from typing import Any, Dict


def success(data: Any = None) -> Dict[str, Any]:
    return {"success": True, "data": data}
