"""
Tx - transaction drafting, fee policy and end-to-end execution.

Uses eth-account for signing; every node interaction goes through
ethwire.rpc.
"""
