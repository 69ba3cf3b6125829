from fastapi import Request

from services.registry import DatasetRegistry


def get_registry(request: Request) -> DatasetRegistry:
    return request.app.state.registry
