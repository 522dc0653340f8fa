from .codec import decode_response, encode_request

__all__ = ["decode_response", "encode_request"]
