"""
dsutils.core

In-memory data structures:
 - Graph / GraphNode: weighted directed graph with BFS, DFS and Dijkstra
 - Trie / TrieNode: prefix tree with prefix queries and pruning removal
"""

from .graph import Graph, GraphNode, InvalidNodeError
from .trie import Trie, TrieNode

__all__ = [
    "Graph",
    "GraphNode",
    "InvalidNodeError",
    "Trie",
    "TrieNode",
]
