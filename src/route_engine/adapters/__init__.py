"""
Adapter implementations for the route engine.

Adapters are concrete implementations of the port interfaces: the four
search algorithms, network data sources and demand models.
"""
