from .client import APIClient, api_client

__all__ = ['APIClient', 'api_client']
