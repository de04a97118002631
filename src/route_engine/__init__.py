"""
Route computation and fare pricing engine.

Pure, synchronous computation: callers pass airports, connections and
pricing configuration in memory and get routes and offers back.
"""
