from fastapi import Request

from status_api.services.wormly import WormlyClient


def get_wormly_client(request: Request) -> WormlyClient:
    """Return the Wormly client stored on app state during lifespan."""
    return request.app.state.wormly_client
