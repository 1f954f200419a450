import secrets
from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from sogrinha.app import App
from sogrinha.bridge.dispatcher import Bridge
from sogrinha.config import Config
from sogrinha.errors import AuthenticationError

# Security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_config(request: Request) -> Config:
    return cast(Config, request.app.state.config)


async def get_bridge(request: Request) -> Bridge:
    return cast(Bridge, request.app.state.bridge)


async def verify_shell_token(
    config: Annotated[Config, Depends(get_config)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
) -> None:
    """Require the per-launch shell token as Bearer credentials, when one is configured."""
    if config.shell_token is None:
        return
    if credentials and credentials.scheme == "Bearer" and secrets.compare_digest(credentials.credentials, config.shell_token):
        return
    raise AuthenticationError


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
BridgeDep = Annotated[Bridge, Depends(get_bridge)]
ShellTokenDep = Depends(verify_shell_token)
