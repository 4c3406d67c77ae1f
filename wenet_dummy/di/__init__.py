"""
Dependency Injection of the WeNet dummy component.

Usage:
    from wenet_dummy.di import Container, inject

    container = Container()
    container.register_instance(WeNetProfileManagerClient, client)

    # In FastAPI routes
    @app.get("/profiles/{user_id}")
    async def get_profile(client=Depends(inject(WeNetProfileManagerClient))):
        ...
"""

from .container import Container, inject

__all__ = ["Container", "inject"]
