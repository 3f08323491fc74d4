from typing import Any, Dict

from fastapi import Request
import orjson

from src.platform.logging.loguru_io import Logger


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Parse the request body as a JSON object; malformed or non-object bodies count as {}."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        parsed = orjson.loads(raw)
    except orjson.JSONDecodeError:
        Logger.base.warning(f'⚠️ [HTTP] Malformed JSON body on {request.url.path}, using {{}}')
        return {}
    return parsed if isinstance(parsed, dict) else {}
