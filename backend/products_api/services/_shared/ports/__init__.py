from products_api.services._shared.ports.token_provider import StubTokenProvider, TokenProvider

__all__ = ["StubTokenProvider", "TokenProvider"]
