"""
Conventional controller routing.

Routes are declared with their canonical spelling (``/Home/Privacy``),
but clients may address them the way the ``{controller}/{action}/{id?}``
convention allows: in any letter case, with a trailing slash, and with
one extra ``id`` segment after the action.  ``ControllerRouteMiddleware``
rewrites such paths to the canonical one before routing.  No action
takes an ``id`` yet; it is accepted and exposed as
``request.state.route_id``.
"""

from typing import Dict, Optional, Tuple

from fastapi.routing import APIRoute


class ControllerRouteMiddleware:
    """ASGI middleware mapping conventional paths onto declared routes."""

    def __init__(self, app) -> None:
        self.app = app
        self._canonical: Optional[Dict[str, str]] = None

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http":
            path, route_id = self.resolve(scope["path"], scope["app"].routes)
            if path != scope["path"]:
                scope = dict(scope, path=path, raw_path=path.encode("utf-8"))
            if route_id is not None:
                scope = dict(scope, state={**scope.get("state", {}), "route_id": route_id})
        await self.app(scope, receive, send)

    def _canonical_paths(self, routes) -> Dict[str, str]:
        if self._canonical is None:
            self._canonical = {
                route.path.lower(): route.path
                for route in routes
                if isinstance(route, APIRoute) and "{" not in route.path
            }
        return self._canonical

    def resolve(self, path: str, routes) -> Tuple[str, Optional[str]]:
        """Return the canonical path for ``path`` and the trailing id, if any.

        Unknown paths are returned unchanged so that routing answers 404.
        """
        canonical = self._canonical_paths(routes)
        key = path.rstrip("/").lower() or "/"
        if key in canonical:
            return canonical[key], None
        head, _, route_id = key.rpartition("/")
        # Only /controller/action/id carries an id.
        if route_id and head.count("/") == 2 and head in canonical:
            original_id = path.rstrip("/").rpartition("/")[2]
            return canonical[head], original_id
        return path, None
