from fastapi import HTTPException

from launchwatch.services.results import ErrorKind, Result

ERROR_RESPONSES = {
    ErrorKind.UNAUTHENTICATED: (401, "Not authenticated"),
    ErrorKind.FORBIDDEN: (403, "Not authorized"),
    ErrorKind.NOT_FOUND: (404, "Not found"),
}


def unwrap(result: Result):
    """Return the result's value or raise the matching HTTPException."""
    if result.ok:
        return result.value
    status_code, detail = ERROR_RESPONSES[result.error]
    raise HTTPException(status_code=status_code, detail=detail)
