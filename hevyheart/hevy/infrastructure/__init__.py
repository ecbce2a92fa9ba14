from .client import HevyClient, create_hevy_client

__all__ = ["HevyClient", "create_hevy_client"]
