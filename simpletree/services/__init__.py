"""Services for token access and end-to-end parsing."""

from simpletree.services.token_stream import BufferedTokenStream, TokenStream

__all__ = ["TokenStream", "BufferedTokenStream"]
