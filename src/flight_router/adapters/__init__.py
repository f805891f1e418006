"""
Adapter implementations for the Flight Router.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of the network source, graph building and the
routing algorithm.
"""
