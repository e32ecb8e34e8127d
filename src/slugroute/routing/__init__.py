"""Routing: slug matching, URL generation, and the prioritized router chain.

Nothing here holds a routing table: every path is resolved on demand
through a category repository.
"""
