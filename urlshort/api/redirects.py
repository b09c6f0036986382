# urlshort/api/redirects.py

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from urlshort.core.resolver import Resolver
from urlshort.models.mappings import Redirect

router = APIRouter(tags=["redirects"])

METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_resolver(request: Request) -> Resolver:
    return request.app.state.resolver


def request_key(request: Request) -> str:
    """
    Lookup key for a request: the path as received, plus "?query" if any.

    Uses the undecoded raw_path so "/a%2Fb" and "/a/b" stay distinct.
    """
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.decode("latin-1")
    else:
        path = request.scope["path"]
    query = request.scope.get("query_string", b"").decode("latin-1")
    if query:
        return f"{path}?{query}"
    return path


@router.api_route("/{full_path:path}", methods=METHODS, include_in_schema=False)
def redirect_or_fallback(
    request: Request,
    resolver: Resolver = Depends(get_resolver),
) -> Response:
    """
    Redirect mapped paths, otherwise return the default handler's response.
    """
    outcome = resolver.resolve(request_key(request))

    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.url, status_code=outcome.status_code)

    return PlainTextResponse(outcome.body, status_code=outcome.status_code)
