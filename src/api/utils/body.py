from fastapi import Request


async def read_json_object(request: Request) -> dict:
    """
    Request body as a dict; malformed, too deeply nested or non-object JSON
    yields {}.

    Used where the response contract must not depend on body validity.
    """
    try:
        payload = await request.json()
    except (ValueError, RecursionError):
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        return {}
    return payload if isinstance(payload, dict) else {}
