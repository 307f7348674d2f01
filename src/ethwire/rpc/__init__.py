"""
RPC - JSON-RPC envelope codec, transport and node method helpers.

Uses httpx for HTTP and eth-abi for revert data decoding.
"""
